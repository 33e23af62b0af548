"""
Module: layout.instructions

Purpose:
    Draw instruction records handed to the document backend.
    Coordinates are millimeters with a top-left origin and Y growing
    downwards; output.renderer owns the conversion to PDF points and the
    vertical flip.

Key Classes:
    - ImagePlacement: Raster image box
    - RectangleBorder: Stroked rectangle
    - CircleBorder: Stroked circle
    - LineSegment: Stroked line
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class ImagePlacement:
    """
    Image box on a sheet.
    
    Attributes:
        x: Left edge (mm)
        y: Top edge (mm)
        width: Width (mm)
        height: Height (mm)
        image_ref: Pillow image owned by the content source
        page_id: ContentPage id the image belongs to
    """
    x: float
    y: float
    width: float
    height: float
    image_ref: Optional[Any]
    page_id: str = ""


@dataclass(frozen=True)
class RectangleBorder:
    x: float
    y: float
    width: float
    height: float
    
    @property
    def right(self) -> float:
        return self.x + self.width
    
    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class CircleBorder:
    cx: float
    cy: float
    radius: float


@dataclass(frozen=True)
class LineSegment:
    x1: float
    y1: float
    x2: float
    y2: float
    
    @property
    def length(self) -> float:
        return ((self.x2 - self.x1) ** 2 + (self.y2 - self.y1) ** 2) ** 0.5
    
    @property
    def is_horizontal(self) -> bool:
        return self.y1 == self.y2


DrawInstruction = Union[ImagePlacement, RectangleBorder, CircleBorder, LineSegment]
