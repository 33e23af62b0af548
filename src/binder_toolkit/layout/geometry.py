"""
Module: layout.geometry

Purpose:
    Resolve the content area of a sheet for a binder standard.
    Pure functions of (standard, target size, side, padding).

Key Functions:
    - hole_margin(): Width kept free along the punched edge
    - resolve_content_area(): Content rectangle within a sheet
    - native_content_area(): Content rectangle within a native-size slot

Key Classes:
    - DegenerateAreaError: Resolved area has no printable size
    - UnsupportedSizeCombination: Warning for the approximate fallback

Algorithm:
    Cases evaluated in order:
    1. Target equals native size: full native height, width reduced by
       the hole margin, shifted right by the margin for right pages.
    2. Target is larger and holds the native sheet: native sheet centred
       on the target, plus the margin shift for right pages.
    3. Anything else: margin shift only. Approximate, so a warning is issued.

Used By:
    - layout.planner: Sheet planning
    - layout.positioning: Fit/fill helpers
"""

from __future__ import annotations

import logging
import warnings

from binder_toolkit.binders.models import BinderStandard
from binder_toolkit.common.paper import PaperSize
from binder_toolkit.common.thresholds import GEOMETRY

from .models import ContentArea, PageSide

logger = logging.getLogger(__name__)


class DegenerateAreaError(ValueError):
    """Content area has non-positive width or height."""
    pass


class UnsupportedSizeCombination(UserWarning):
    """Target/native size pair handled by the approximate fallback."""
    pass


def hole_margin(standard: BinderStandard, padding: bool) -> float:
    """
    Distance from the punched edge that must stay free of content.

    Args:
        standard: Binder standard
        padding: Add the fixed clearance from GEOMETRY.hole_padding

    Returns:
        Margin in mm (edge distance + hole radius + optional padding)
    """
    extra = GEOMETRY.hole_padding if padding else 0.0
    return standard.edge_distance + standard.hole_diameter / 2 + extra


def native_content_area(
    standard: BinderStandard,
    side: PageSide,
    padding: bool,
) -> ContentArea:
    """Content area of a native-size sheet whose origin is (0, 0)."""
    margin = hole_margin(standard, padding)
    native = standard.native_size
    area = ContentArea(
        width=native.width - margin,
        height=native.height,
        offset_x=margin if PageSide(side) is PageSide.RIGHT else 0.0,
        offset_y=0.0,
    )
    _check_area(area, standard)
    return area


def resolve_content_area(
    standard: BinderStandard,
    target_size: PaperSize,
    side: PageSide,
    padding: bool,
) -> ContentArea:
    """
    Resolve the content rectangle for a page on ``target_size`` stock.

    Args:
        standard: Binder standard
        target_size: Paper the sheet is printed on
        side: Page side (LEFT: holes on the right edge)
        padding: Whether to add the hole padding

    Returns:
        ContentArea in mm relative to the target sheet's top-left corner.
        ``approximate`` is set when the fallback branch was used.

    Raises:
        DegenerateAreaError: If width or height is not positive

    Example:
        >>> area = resolve_content_area(lookup_standard("a5-20-hole"), A5, PageSide.LEFT, False)
        >>> area.width, area.offset_x
        (139.5, 0.0)
    """
    side = PageSide(side)
    native = standard.native_size

    if target_size == native:
        return native_content_area(standard, side, padding)

    margin = hole_margin(standard, padding)
    width = native.width - margin
    height = native.height

    if target_size.contains(native):
        offset_x = (target_size.width - native.width) / 2
        offset_y = (target_size.height - native.height) / 2
        if side is PageSide.RIGHT:
            offset_x += margin
        area = ContentArea(width=width, height=height, offset_x=offset_x, offset_y=offset_y)
    else:
        message = (
            f"{standard.id} ({native.name}) on {target_size.name} stock "
            "uses approximate offsets"
        )
        logger.warning(message)
        warnings.warn(message, UnsupportedSizeCombination, stacklevel=2)
        area = ContentArea(
            width=width,
            height=height,
            offset_x=margin if side is PageSide.RIGHT else 0.0,
            offset_y=0.0,
            approximate=True,
        )

    _check_area(area, standard)
    return area


def _check_area(area: ContentArea, standard: BinderStandard) -> None:
    if area.width <= 0 or area.height <= 0:
        raise DegenerateAreaError(
            f"Content area for {standard.id} is {area.width:.2f}x{area.height:.2f} mm; "
            "sheet too small for the hole margin"
        )
