"""
Module: layout.models

Purpose:
    Data models for sheet layout.
    Immutable dataclasses for content pages, resolved areas and sheet plans.

Key Classes:
    - PageSide: Which physical edge the holes face for a page
    - PagePosition: User offset and scale of content inside its area
    - ContentPage: One logical unit of user content
    - Rect / ContentArea: Rectangles on a sheet (mm, top-left origin)
    - Slot: Sub-area of a sheet (single, 2-up top, 2-up bottom)
    - SlotPlacement: ContentPage assigned to a slot
    - FacePlan: Draw instructions for one side of a sheet
    - SheetPlan: Content face plus mirrored outline face
    - LayoutResult: Final layout output

Dependencies:
    - PIL: Image reference type
    - layout.instructions: Draw records

Used By:
    - layout.planner: Creates SheetPlans
    - content.pages: Creates and edits ContentPages
    - output.renderer: Consumes LayoutResult
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple

from PIL import Image

from binder_toolkit.common.thresholds import GEOMETRY
from binder_toolkit.common.units import px_to_mm

from .instructions import DrawInstruction


class InvalidContentDimensionsError(ValueError):
    """Content page raster has zero or negative pixel dimensions."""
    pass


class PageSide(str, Enum):
    """
    Side of the bound document a page sits on.
    
    LEFT pages have their holes on the right edge, RIGHT pages on the left.
    """
    LEFT = "left"
    RIGHT = "right"
    
    @property
    def opposite(self) -> "PageSide":
        return PageSide.RIGHT if self is PageSide.LEFT else PageSide.LEFT
    
    @classmethod
    def for_index(cls, index: int) -> "PageSide":
        """Default alternating side: even index left, odd index right."""
        return cls.LEFT if index % 2 == 0 else cls.RIGHT


class ContentKind(str, Enum):
    IMAGE = "image"
    DOCUMENT_PAGE = "document_page"


@dataclass(frozen=True)
class PagePosition:
    """
    Placement of content inside its content area.
    
    Offsets may be negative: content is allowed to overflow the area.
    
    Attributes:
        x_offset_mm: Offset from the area's left edge
        y_offset_mm: Offset from the area's top edge
        scale: Scale factor (1 = 100%)
    """
    x_offset_mm: float = 0.0
    y_offset_mm: float = 0.0
    scale: float = 1.0


@dataclass(frozen=True)
class ContentPage:
    """
    One logical page of user content (immutable).
    
    Edits return new instances via with_position()/with_side().
    
    Attributes:
        id: Stable identifier
        kind: Source kind (image or rendered document page)
        pixel_width: Raster width in pixels
        pixel_height: Raster height in pixels
        image: Pillow image owned by the content source (may be None)
        position: Offset/scale record
        side: Page side, None until assigned
        dpi: Assumed raster density
        source_name: Originating file name for diagnostics
        
    Raises:
        InvalidContentDimensionsError: If either pixel dimension is <= 0
    """
    id: str
    kind: ContentKind
    pixel_width: int
    pixel_height: int
    image: Optional[Image.Image] = field(default=None, compare=False, repr=False)
    position: PagePosition = field(default_factory=PagePosition)
    side: Optional[PageSide] = None
    dpi: int = GEOMETRY.content_dpi
    source_name: str = ""
    
    def __post_init__(self) -> None:
        if self.pixel_width <= 0 or self.pixel_height <= 0:
            raise InvalidContentDimensionsError(
                f"Page {self.id!r} has invalid pixel size "
                f"{self.pixel_width}x{self.pixel_height}"
            )
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive: {self.dpi}")
    
    def size_mm(self) -> Tuple[float, float]:
        """Unscaled physical size (width, height) in mm."""
        return (
            px_to_mm(self.pixel_width, self.dpi),
            px_to_mm(self.pixel_height, self.dpi),
        )
    
    def scaled_size_mm(self) -> Tuple[float, float]:
        """Physical size after applying position.scale."""
        width, height = self.size_mm()
        scale = self.position.scale
        return width * scale, height * scale
    
    def with_position(self, position: PagePosition) -> "ContentPage":
        """
        Return a copy with a new position.
        
        Raises:
            ValueError: If position.scale is not positive
        """
        if position.scale <= 0:
            raise ValueError(f"scale must be positive: {position.scale}")
        return replace(self, position=position)
    
    def with_side(self, side: PageSide) -> "ContentPage":
        return replace(self, side=PageSide(side))


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in mm (top-left origin)."""
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
    
    def mirrored(self, sheet_width: float) -> "Rect":
        """Mirror horizontally across the sheet's vertical center line."""
        return Rect(sheet_width - self.x - self.width, self.y, self.width, self.height)


@dataclass(frozen=True)
class ContentArea:
    """
    Region of a sheet available for content.
    
    Attributes:
        width: Width in mm (native width minus hole margin)
        height: Height in mm
        offset_x: Left edge on the sheet in mm
        offset_y: Top edge on the sheet in mm
        approximate: True when resolved by the fallback branch
    """
    width: float
    height: float
    offset_x: float
    offset_y: float
    approximate: bool = False
    
    @property
    def rect(self) -> Rect:
        return Rect(self.offset_x, self.offset_y, self.width, self.height)
    
    def translated(self, dx: float, dy: float) -> "ContentArea":
        return replace(self, offset_x=self.offset_x + dx, offset_y=self.offset_y + dy)


class Slot(str, Enum):
    """Sub-area of a sheet."""
    SINGLE = "single"
    TOP = "top"
    BOTTOM = "bottom"


class Face(str, Enum):
    CONTENT = "content"
    OUTLINE = "outline"


@dataclass(frozen=True)
class SlotPlacement:
    """
    A ContentPage assigned to a slot of a sheet.
    
    Attributes:
        page: The content page
        slot: Slot on the sheet
        trim: Native-size trim rectangle of the slot (content side)
        area: Resolved content area on the content side
    """
    page: ContentPage
    slot: Slot
    trim: Rect
    area: ContentArea


@dataclass(frozen=True)
class FacePlan:
    """Draw instructions for one side of a physical sheet."""
    face: Face
    instructions: Tuple[DrawInstruction, ...]
    
    @property
    def is_empty(self) -> bool:
        return len(self.instructions) == 0


@dataclass(frozen=True)
class SheetPlan:
    """
    One physical sheet.
    
    The content face is printed on the front and the outline face on the
    back; the outline mirrors every slot of the content face.
    
    Attributes:
        index: Sheet number (0-indexed)
        width: Sheet width in mm
        height: Sheet height in mm
        placements: Content pages on this sheet
        content: Front face instructions
        outline: Back face instructions
    """
    index: int
    width: float
    height: float
    placements: Tuple[SlotPlacement, ...]
    content: FacePlan
    outline: FacePlan
    
    def placement_for(self, slot: Slot) -> Optional[SlotPlacement]:
        for placement in self.placements:
            if placement.slot is slot:
                return placement
        return None
    
    @property
    def page_ids(self) -> List[str]:
        return [p.page.id for p in self.placements]


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.
    
    Attributes:
        sheets: Physical sheets in print order
        two_up: True if sheets use 2-up packing
        warnings: Warning messages collected during planning
        
    Example:
        >>> result.sheet_count
        3
        >>> len(result.faces)
        6  # content, outline, content, outline, ...
    """
    sheets: Tuple[SheetPlan, ...]
    two_up: bool = False
    warnings: Tuple[str, ...] = ()
    
    @property
    def sheet_count(self) -> int:
        return len(self.sheets)
    
    @property
    def faces(self) -> List[Tuple[SheetPlan, FacePlan]]:
        """Logical pages in print order, content face before its outline."""
        result: List[Tuple[SheetPlan, FacePlan]] = []
        for sheet in self.sheets:
            result.append((sheet, sheet.content))
            result.append((sheet, sheet.outline))
        return result
    
    @property
    def page_count(self) -> int:
        return 2 * len(self.sheets)
