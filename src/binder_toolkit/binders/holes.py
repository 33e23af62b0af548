"""
Module: binders.holes

Purpose:
    Single evaluator for the closed set of hole layout kinds.
    Every formula depends only on the sheet height and the layout's
    own parameters.

Key Functions:
    - hole_centers(): Ordered hole Y offsets for a layout

Notes:
    Offsets are measured top-down in mm. The returned list is ascending
    by construction (each formula emits holes from top to bottom); it is
    not sorted afterwards.
"""

from __future__ import annotations

from typing import List

from .models import (
    HOLES_PER_GROUP,
    EvenSpacedPitch,
    EvenSpacedSpan,
    HoleLayout,
    SymmetricGroups,
)


def hole_centers(layout: HoleLayout, hole_count: int, sheet_height: float) -> List[float]:
    """
    Compute hole center offsets for a sheet.
    
    Args:
        layout: Hole layout variant
        hole_count: Number of holes to emit
        sheet_height: Sheet height in mm
        
    Returns:
        List of ``hole_count`` Y offsets in mm, top to bottom
        
    Raises:
        TypeError: If layout is not a known variant
        
    Example:
        >>> hole_centers(SymmetricGroups(group_gap=50.8, pitch=19), 6, 210)
        [41.6, 60.6, 79.6, 130.4, 149.4, 168.4]
    """
    if isinstance(layout, EvenSpacedPitch):
        return _even_spaced(hole_count, layout.pitch, sheet_height)
    if isinstance(layout, EvenSpacedSpan):
        return _even_spaced(hole_count, layout.span, sheet_height)
    if isinstance(layout, SymmetricGroups):
        return _symmetric_groups(layout.group_gap, layout.pitch, sheet_height)
    raise TypeError(f"Unknown hole layout: {layout!r}")


def _even_spaced(count: int, pitch: float, sheet_height: float) -> List[float]:
    span = pitch * (count - 1)
    start = (sheet_height - span) / 2
    return [start + i * pitch for i in range(count)]


def _symmetric_groups(group_gap: float, pitch: float, sheet_height: float) -> List[float]:
    center = sheet_height / 2
    top_group_center = center - group_gap / 2 - pitch
    bottom_group_center = center + group_gap / 2 + pitch
    
    holes: List[float] = []
    for group_center in (top_group_center, bottom_group_center):
        offset = -(HOLES_PER_GROUP // 2)
        holes.extend(group_center + (offset + i) * pitch for i in range(HOLES_PER_GROUP))
    return holes
