"""
Module: layout.planner

Purpose:
    Assign content pages to physical sheets and build the draw
    instructions for both faces of every sheet.
    The only component aware of sheet pairing and 2-up packing.

Key Functions:
    - plan_layout(): Main planning function
    - packing_mode(): Decide single vs 2-up packing

Algorithm:
    Single mode:
    1. One sheet per content page, in input order
    2. Content face: one image placed in the resolved content area
    3. Outline face: the page's trim rectangle mirrored horizontally

    2-up mode (native sheet smaller than the stock, two or more pages):
    1. Stock is turned landscape; two native-size slots sit side by side,
       TOP at x=0 and BOTTOM directly after it, vertically centred
    2. Pages are consumed two at a time, TOP first
    3. Each slot uses native-size hole margin math at its own origin
    4. Outline mirrors each occupied slot horizontally, Y unchanged

Dependencies:
    - layout.geometry: Content areas
    - layout.outline: Back-side marks

Used By:
    - controller: Build pipeline
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from binder_toolkit.binders.models import BinderStandard
from binder_toolkit.common.paper import PaperSize

from .geometry import hole_margin, native_content_area, resolve_content_area
from .instructions import DrawInstruction, ImagePlacement
from .models import (
    ContentArea,
    ContentPage,
    Face,
    FacePlan,
    LayoutResult,
    PageSide,
    Rect,
    SheetPlan,
    Slot,
    SlotPlacement,
)
from .outline import outline_instructions

logger = logging.getLogger(__name__)

TWO_UP_SLOTS = (Slot.TOP, Slot.BOTTOM)


class PackingMode(str, Enum):
    SINGLE = "single"
    TWO_UP = "two_up"


def packing_mode(
    standard: BinderStandard,
    paper: PaperSize,
    page_count: int,
) -> PackingMode:
    """
    Decide how pages are packed onto sheets.

    2-up applies only when the stock is larger than the binder's native
    size, two native sheets fit side by side on the landscape stock, and
    there are at least two pages.
    """
    native = standard.native_size
    if paper == native or paper.area <= native.area or page_count < 2:
        return PackingMode.SINGLE
    sheet = paper.landscape()
    if sheet.width >= 2 * native.width and sheet.height >= native.height:
        return PackingMode.TWO_UP
    return PackingMode.SINGLE


def plan_layout(
    pages: Sequence[ContentPage],
    standard: BinderStandard,
    paper: PaperSize,
    *,
    padding: bool = True,
) -> LayoutResult:
    """
    Plan sheets for all content pages.

    Pages without an explicit side get the alternating default for their
    index (even left, odd right). Calling this repeatedly with the same
    input gives the same result.

    Args:
        pages: Content pages in print order
        standard: Binder standard
        paper: Stock the sheets are printed on
        padding: Add the hole padding to the hole margin

    Returns:
        LayoutResult with one SheetPlan per physical sheet

    Raises:
        DegenerateAreaError: If the standard leaves no content area

    Example:
        >>> result = plan_layout(pages, lookup_standard("a5-20-hole"), A4)
        >>> result.two_up, result.sheet_count
        (True, 2)  # for 3 pages
    """
    mode = packing_mode(standard, paper, len(pages))
    warnings: List[str] = []

    if mode is PackingMode.TWO_UP:
        sheets = _plan_two_up(pages, standard, paper, padding)
    else:
        sheets = _plan_single(pages, standard, paper, padding, warnings)

    logger.info(
        f"Planned {len(pages)} pages onto {len(sheets)} sheets "
        f"({mode.value}, {standard.id} on {paper.name})"
    )

    return LayoutResult(
        sheets=tuple(sheets),
        two_up=mode is PackingMode.TWO_UP,
        warnings=tuple(warnings),
    )


def _page_side(page: ContentPage, index: int) -> PageSide:
    return page.side if page.side is not None else PageSide.for_index(index)


def _plan_single(
    pages: Sequence[ContentPage],
    standard: BinderStandard,
    paper: PaperSize,
    padding: bool,
    warnings: List[str],
) -> List[SheetPlan]:
    native = standard.native_size
    margin = hole_margin(standard, padding)
    sheets: List[SheetPlan] = []

    for index, page in enumerate(pages):
        side = _page_side(page, index)
        area = resolve_content_area(standard, paper, side, padding)
        if area.approximate:
            warnings.append(
                f"Page {page.id}: {native.name} binder on {paper.name} stock "
                "uses approximate offsets"
            )

        # Trim origin is the area origin without the hole margin shift
        shift = margin if side is PageSide.RIGHT else 0.0
        trim = Rect(area.offset_x - shift, area.offset_y, native.width, native.height)

        placement = SlotPlacement(page=page.with_side(side), slot=Slot.SINGLE, trim=trim, area=area)
        sheets.append(_build_sheet(index, paper.width, paper.height, [placement], standard))

    return sheets


def _plan_two_up(
    pages: Sequence[ContentPage],
    standard: BinderStandard,
    paper: PaperSize,
    padding: bool,
) -> List[SheetPlan]:
    native = standard.native_size
    sheet_size = paper.landscape()
    top_y = (sheet_size.height - native.height) / 2
    slot_origins = {
        Slot.TOP: (0.0, top_y),
        Slot.BOTTOM: (native.width, top_y),
    }
    sheets: List[SheetPlan] = []

    for sheet_index, start in enumerate(range(0, len(pages), 2)):
        placements: List[SlotPlacement] = []
        for offset, slot in enumerate(TWO_UP_SLOTS):
            page_index = start + offset
            if page_index >= len(pages):
                break
            page = pages[page_index]
            side = _page_side(page, page_index)
            x, y = slot_origins[slot]
            area = native_content_area(standard, side, padding).translated(x, y)
            trim = Rect(x, y, native.width, native.height)
            placements.append(
                SlotPlacement(page=page.with_side(side), slot=slot, trim=trim, area=area)
            )
        sheets.append(
            _build_sheet(sheet_index, sheet_size.width, sheet_size.height, placements, standard)
        )

    return sheets


def _build_sheet(
    index: int,
    width: float,
    height: float,
    placements: List[SlotPlacement],
    standard: BinderStandard,
) -> SheetPlan:
    content: List[DrawInstruction] = []
    outline: List[DrawInstruction] = []

    for placement in placements:
        content.append(image_placement(placement.page, placement.area))
        outline.extend(
            outline_instructions(placement.trim.mirrored(width), standard, placement.page.side)
        )

    logger.debug(
        f"Sheet {index}: pages {[p.page.id for p in placements]}, "
        f"{len(outline)} outline marks"
    )

    return SheetPlan(
        index=index,
        width=width,
        height=height,
        placements=tuple(placements),
        content=FacePlan(face=Face.CONTENT, instructions=tuple(content)),
        outline=FacePlan(face=Face.OUTLINE, instructions=tuple(outline)),
    )


def image_placement(page: ContentPage, area: ContentArea) -> ImagePlacement:
    """Image box for a page inside its content area (mm, top-left origin)."""
    width, height = page.scaled_size_mm()
    return ImagePlacement(
        x=area.offset_x + page.position.x_offset_mm,
        y=area.offset_y + page.position.y_offset_mm,
        width=width,
        height=height,
        image_ref=page.image,
        page_id=page.id,
    )


def sheet_slots(sheet: SheetPlan) -> Tuple[Optional[SlotPlacement], ...]:
    """Placements of a 2-up sheet as (top, bottom); missing slots are None."""
    return tuple(sheet.placement_for(slot) for slot in TWO_UP_SLOTS)
