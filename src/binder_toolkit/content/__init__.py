"""
Module: content

Purpose:
    Content ingestion and page management.

Key Functions:
    - load_files(): Load images and PDFs as ContentPages

Key Classes:
    - PageFactory: ContentPage construction with unique ids
    - PageCollection: Ordered, editable pages
"""

from .pages import PageCollection, PageFactory, PageNotFoundError
from .loader import (
    ContentLoadError,
    is_supported,
    load_files,
    load_image,
    load_pdf,
)

__all__ = [
    "PageCollection",
    "PageFactory",
    "PageNotFoundError",
    "ContentLoadError",
    "is_supported",
    "load_files",
    "load_image",
    "load_pdf",
]
