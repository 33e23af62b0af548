"""
Module: layout.outline

Purpose:
    Describe the cutting outline printed on the back of a content sheet:
    trim rectangle, hole circles and corner crop marks.
    Produces draw instructions only; output.renderer does the drawing.

Key Functions:
    - outline_instructions(): Outline marks for one trim rectangle
    - hole_x(): Horizontal hole position on the back side
    - crop_marks(): Eight crop mark segments around a rectangle

Notes:
    The outline is printed on the back of the sheet, so trim rectangles
    arrive already mirrored. Holes for a LEFT page are drawn at
    ``x + width - edge_distance``, for a RIGHT page at ``x + edge_distance``.
"""

from __future__ import annotations

from typing import List

from binder_toolkit.binders.models import BinderStandard
from binder_toolkit.common.thresholds import OUTLINE

from .instructions import CircleBorder, DrawInstruction, LineSegment, RectangleBorder
from .models import PageSide, Rect


def hole_x(area: Rect, standard: BinderStandard, side: PageSide) -> float:
    """X coordinate (mm) of the hole centers on the outline side."""
    if PageSide(side) is PageSide.LEFT:
        return area.x + area.width - standard.edge_distance
    return area.x + standard.edge_distance


def crop_marks(
    area: Rect,
    *,
    length: float = OUTLINE.crop_mark_length,
    offset: float = OUTLINE.crop_mark_offset,
) -> List[LineSegment]:
    """
    Crop marks for the four corners of ``area``.

    Each corner gets one horizontal and one vertical segment of ``length``
    mm, starting ``offset`` mm outside the trim corner and pointing away
    from the rectangle.

    Returns:
        Eight segments: (horizontal, vertical) per corner, corners ordered
        top-left, top-right, bottom-left, bottom-right.
    """
    marks: List[LineSegment] = []
    for corner_x, corner_y in (
        (area.x, area.y),
        (area.right, area.y),
        (area.x, area.bottom),
        (area.right, area.bottom),
    ):
        is_left = corner_x == area.x
        is_top = corner_y == area.y

        if is_left:
            h_start, h_end = corner_x - offset - length, corner_x - offset
        else:
            h_start, h_end = corner_x + offset, corner_x + offset + length
        marks.append(LineSegment(h_start, corner_y, h_end, corner_y))

        if is_top:
            v_start, v_end = corner_y - offset - length, corner_y - offset
        else:
            v_start, v_end = corner_y + offset, corner_y + offset + length
        marks.append(LineSegment(corner_x, v_start, corner_x, v_end))
    return marks


def outline_instructions(
    area: Rect,
    standard: BinderStandard,
    side: PageSide,
) -> List[DrawInstruction]:
    """
    Draw instructions for one trim rectangle on the back side.

    Args:
        area: Trim rectangle already placed in back-side coordinates
        standard: Binder standard (holes, diameter, edge distance)
        side: Page side of the content printed on the front

    Returns:
        [RectangleBorder, hole_count x CircleBorder, 8 x LineSegment]

    Example:
        >>> marks = outline_instructions(Rect(0, 0, 148, 210), standard, PageSide.LEFT)
        >>> len(marks)
        29  # 1 + 20 + 8 for the 20-hole standard
    """
    instructions: List[DrawInstruction] = [
        RectangleBorder(area.x, area.y, area.width, area.height),
    ]

    x = hole_x(area, standard, side)
    for center in standard.hole_centers(area.height):
        instructions.append(CircleBorder(cx=x, cy=area.y + center, radius=standard.hole_radius))

    instructions.extend(crop_marks(area))
    return instructions
