"""
Module: output

Purpose:
    PDF rendering of sheet layouts.
    Converts LayoutResult to duplex-ready PDF files using ReportLab.

Key Functions:
    - render_to_pdf(): Render layout to PDF
"""

from .renderer import render_to_pdf

__all__ = [
    "render_to_pdf",
]
