"""
Module: binders.registry

Purpose:
    Closed catalog of supported binder standards.

Key Functions:
    - lookup_standard(): Get a standard by id
    - list_standards(): All standards in catalog order
    - supported_standard_ids(): Catalog ids

Key Classes:
    - UnknownStandardError: Raised for ids outside the catalog

Used By:
    - config: Binder id validation
    - controller: Standard resolution
    - __main__: --list-binders
"""

from __future__ import annotations

from typing import Dict, List

from binder_toolkit.common.paper import A4, A5

from .models import BinderStandard, EvenSpacedPitch, EvenSpacedSpan, SymmetricGroups


class UnknownStandardError(KeyError):
    """Binder standard id not in the catalog."""
    
    def __init__(self, standard_id: str) -> None:
        super().__init__(standard_id)
        self.standard_id = standard_id
    
    def __str__(self) -> str:
        return (
            f"Unknown binder standard {self.standard_id!r}; "
            f"expected one of {supported_standard_ids()}"
        )


HOLE_DIAMETER = 6.0

_CATALOG: Dict[str, BinderStandard] = {
    standard.id: standard
    for standard in (
        BinderStandard(
            id="a5-20-hole",
            name="A5 20-Hole (Japanese)",
            native_size=A5,
            hole_count=20,
            hole_diameter=HOLE_DIAMETER,
            edge_distance=5.5,
            layout=EvenSpacedPitch(pitch=9.7),
        ),
        BinderStandard(
            id="a5-2-hole",
            name="A5 2-Hole (ISO 838)",
            native_size=A5,
            hole_count=2,
            hole_diameter=HOLE_DIAMETER,
            edge_distance=12,
            layout=EvenSpacedSpan(span=80),
        ),
        BinderStandard(
            id="a5-6-hole-filofax",
            name="A5 6-Hole (Filofax)",
            native_size=A5,
            hole_count=6,
            hole_diameter=HOLE_DIAMETER,
            edge_distance=12,
            layout=SymmetricGroups(group_gap=50.8, pitch=19),
        ),
        BinderStandard(
            id="a5-6-hole-standard",
            name="A5 6-Hole (Standard)",
            native_size=A5,
            hole_count=6,
            hole_diameter=HOLE_DIAMETER,
            edge_distance=12,
            layout=SymmetricGroups(group_gap=70, pitch=19),
        ),
        BinderStandard(
            id="a4-4-hole",
            name="A4 4-Hole (European)",
            native_size=A4,
            hole_count=4,
            hole_diameter=HOLE_DIAMETER,
            edge_distance=11,
            layout=EvenSpacedSpan(span=80),
        ),
    )
}


def supported_standard_ids() -> List[str]:
    """Return catalog ids in catalog order."""
    return list(_CATALOG)


def list_standards() -> List[BinderStandard]:
    """Return all standards in catalog order."""
    return list(_CATALOG.values())


def lookup_standard(standard_id: str) -> BinderStandard:
    """
    Get binder standard by id.
    
    There is no default: an unknown id is always an error.
    
    Args:
        standard_id: Catalog id like "a5-20-hole"
        
    Returns:
        BinderStandard for the id
        
    Raises:
        UnknownStandardError: If id is not in the catalog
    """
    try:
        return _CATALOG[standard_id]
    except (KeyError, TypeError):
        raise UnknownStandardError(standard_id) from None
