"""Unit conversions between millimeters, PDF points and raster pixels."""

from __future__ import annotations

MM_PER_INCH = 25.4
POINTS_PER_INCH = 72.0


def mm_to_pt(mm: float) -> float:
    """Convert millimeters to PDF points (1/72 inch)."""
    return mm / MM_PER_INCH * POINTS_PER_INCH


def pt_to_mm(pt: float) -> float:
    """Convert PDF points to millimeters."""
    return pt / POINTS_PER_INCH * MM_PER_INCH


def px_to_mm(px: float, dpi: float) -> float:
    """
    Convert a pixel length to millimeters at the given density.
    
    Raises:
        ValueError: If dpi is not positive
    """
    if dpi <= 0:
        raise ValueError(f"dpi must be positive: {dpi}")
    return px / dpi * MM_PER_INCH
