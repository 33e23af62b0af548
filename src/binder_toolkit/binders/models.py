"""
Module: binders.models

Purpose:
    Data models for binder hole-punch standards.
    A standard is data only: its hole pattern is one of a small closed set
    of layout kinds, evaluated by binders.holes.

Key Classes:
    - EvenSpacedPitch: N holes at a fixed pitch, centred on the sheet
    - EvenSpacedSpan: N holes with a fixed distance between neighbours
    - SymmetricGroups: Two 3-hole groups straddling a central gap
    - BinderStandard: Catalog entry

Dependencies:
    - common.paper: Native paper size

Used By:
    - binders.registry: Catalog definition
    - layout.geometry: Hole margin math
    - layout.outline: Hole circles
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from binder_toolkit.common.paper import PaperSize


@dataclass(frozen=True)
class EvenSpacedPitch:
    """Evenly spaced holes at ``pitch`` mm, group centred on the sheet."""
    pitch: float


@dataclass(frozen=True)
class EvenSpacedSpan:
    """
    Evenly spaced holes with ``span`` mm between neighbouring holes.
    
    Evaluated exactly like EvenSpacedPitch; kept separate because the
    standards that use it are specified by hole-to-hole spacing.
    """
    span: float


@dataclass(frozen=True)
class SymmetricGroups:
    """
    Two 3-hole groups separated by ``group_gap`` mm.
    
    Attributes:
        group_gap: Distance between the innermost holes of the two groups
        pitch: Distance between holes inside a group
    """
    group_gap: float
    pitch: float


HoleLayout = Union[EvenSpacedPitch, EvenSpacedSpan, SymmetricGroups]

HOLES_PER_GROUP = 3


@dataclass(frozen=True)
class BinderStandard:
    """
    Binder hole-punch standard (immutable).
    
    Attributes:
        id: Catalog identifier like "a5-20-hole"
        name: Display name
        native_size: Paper size the binder holds
        hole_count: Number of holes
        hole_diameter: Hole diameter in mm
        edge_distance: Paper edge to hole center in mm
        layout: Hole pattern variant
        
    Example:
        >>> standard = lookup_standard("a5-2-hole")
        >>> standard.hole_centers(297)
        [108.5, 188.5]
    """
    id: str
    name: str
    native_size: PaperSize
    hole_count: int
    hole_diameter: float
    edge_distance: float
    layout: HoleLayout
    
    def __post_init__(self) -> None:
        """Validate standard on construction."""
        if self.hole_count <= 0:
            raise ValueError(f"hole_count must be positive: {self.hole_count}")
        if self.hole_diameter <= 0:
            raise ValueError(f"hole_diameter must be positive: {self.hole_diameter}")
        if self.edge_distance < 0:
            raise ValueError(f"edge_distance must be non-negative: {self.edge_distance}")
        if isinstance(self.layout, SymmetricGroups) and self.hole_count != 2 * HOLES_PER_GROUP:
            raise ValueError(
                f"Grouped layout requires {2 * HOLES_PER_GROUP} holes, got {self.hole_count}"
            )
    
    @property
    def hole_radius(self) -> float:
        return self.hole_diameter / 2
    
    def hole_centers(self, sheet_height: float) -> List[float]:
        """Hole center offsets (mm from top of sheet), ascending."""
        from .holes import hole_centers
        return hole_centers(self.layout, self.hole_count, sheet_height)
