"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .paper import (
    PaperSize,
    PAPER_SIZES,
    get_paper_size,
    UnknownPaperSizeError,
)
from .units import mm_to_pt, pt_to_mm, px_to_mm
from .thresholds import GEOMETRY, OUTLINE, RENDERING

__all__ = [
    # paper
    "PaperSize",
    "PAPER_SIZES",
    "get_paper_size",
    "UnknownPaperSizeError",
    # units
    "mm_to_pt",
    "pt_to_mm",
    "px_to_mm",
    # thresholds
    "GEOMETRY",
    "OUTLINE",
    "RENDERING",
]
