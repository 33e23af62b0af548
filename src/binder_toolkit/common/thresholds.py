"""Centralized physical constants.

All fixed distances used by geometry, outline drawing and rendering live
here so they can be tuned in one place. Lengths are millimeters unless the
field name says otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeometryThresholds:
    """Constants for content area resolution."""
    
    hole_padding: float = 5.0  # Extra clearance between content and hole margin
    content_dpi: int = 150  # Assumed density of ingested rasters
    float_tolerance: float = 1e-6


@dataclass(frozen=True)
class OutlineThresholds:
    """Constants for the cutting outline on the back side."""
    
    crop_mark_length: float = 5.0
    crop_mark_offset: float = 3.0  # Gap between trim corner and crop mark


@dataclass(frozen=True)
class RenderingThresholds:
    """Constants for the PDF backend."""
    
    stroke_width_pt: float = 1.0
    stroke_gray: float = 0.0  # Black
    placeholder_gray: float = 0.6


GEOMETRY = GeometryThresholds()
OUTLINE = OutlineThresholds()
RENDERING = RenderingThresholds()
