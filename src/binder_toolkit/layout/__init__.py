"""
Module: layout

Purpose:
    Binder sheet geometry and duplex layout.
    Converts content pages into sheet plans with a content face and a
    mirrored cutting-outline face.

Key Functions:
    - resolve_content_area(): Content rectangle for a sheet
    - plan_layout(): Arrange pages onto sheets
    - outline_instructions(): Back-side marks for one trim rectangle
    - fit_position() / fill_position() / reset_position(): Position presets

Key Classes:
    - ContentPage: Logical content page
    - ContentArea: Resolved content rectangle
    - SheetPlan: One physical sheet
    - LayoutResult: Final layout output

Used By:
    - controller: Main build pipeline
    - output.renderer: PDF backend
"""

from .models import (
    ContentArea,
    ContentKind,
    ContentPage,
    Face,
    FacePlan,
    InvalidContentDimensionsError,
    LayoutResult,
    PagePosition,
    PageSide,
    Rect,
    SheetPlan,
    Slot,
    SlotPlacement,
)
from .instructions import (
    CircleBorder,
    DrawInstruction,
    ImagePlacement,
    LineSegment,
    RectangleBorder,
)
from .geometry import (
    DegenerateAreaError,
    UnsupportedSizeCombination,
    hole_margin,
    native_content_area,
    resolve_content_area,
)
from .outline import outline_instructions, crop_marks
from .planner import PackingMode, packing_mode, plan_layout
from .positioning import fit_position, fill_position, reset_position

__all__ = [
    # Models
    "ContentArea",
    "ContentKind",
    "ContentPage",
    "Face",
    "FacePlan",
    "InvalidContentDimensionsError",
    "LayoutResult",
    "PagePosition",
    "PageSide",
    "Rect",
    "SheetPlan",
    "Slot",
    "SlotPlacement",
    # Instructions
    "CircleBorder",
    "DrawInstruction",
    "ImagePlacement",
    "LineSegment",
    "RectangleBorder",
    # Geometry
    "DegenerateAreaError",
    "UnsupportedSizeCombination",
    "hole_margin",
    "native_content_area",
    "resolve_content_area",
    # Outline
    "outline_instructions",
    "crop_marks",
    # Planner
    "PackingMode",
    "packing_mode",
    "plan_layout",
    # Positioning
    "fit_position",
    "fill_position",
    "reset_position",
]
