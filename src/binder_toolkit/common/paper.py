"""
Module: common.paper

Purpose:
    Fixed paper size catalog. All dimensions are in millimeters and
    describe the portrait orientation.

Key Functions:
    - get_paper_size(): Look up a paper size by name

Key Classes:
    - PaperSize: Immutable paper dimensions
    - UnknownPaperSizeError: Raised for names outside the catalog

Used By:
    - binders.registry: Native size of each binder standard
    - layout.geometry: Content area resolution
    - layout.planner: Sheet sizing and 2-up eligibility
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


class UnknownPaperSizeError(ValueError):
    """Paper size name not in the catalog."""
    pass


@dataclass(frozen=True)
class PaperSize:
    """
    Paper dimensions in millimeters (immutable).
    
    Attributes:
        name: Catalog name like "A4"
        width: Width in mm
        height: Height in mm
        
    Example:
        >>> A5.contains(A5)
        True
        >>> A4.landscape().width
        297
    """
    name: str
    width: float
    height: float
    
    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Paper dimensions must be positive: {self.width}x{self.height}")
    
    @property
    def area(self) -> float:
        return self.width * self.height
    
    def contains(self, other: "PaperSize") -> bool:
        """True if ``other`` fits on this paper without rotation."""
        return self.width >= other.width and self.height >= other.height
    
    def landscape(self) -> "PaperSize":
        """Same paper turned 90 degrees (long edge horizontal)."""
        return PaperSize(
            name=f"{self.name}-landscape",
            width=max(self.width, self.height),
            height=min(self.width, self.height),
        )


A4 = PaperSize(name="A4", width=210, height=297)
A5 = PaperSize(name="A5", width=148, height=210)

PAPER_SIZES: Dict[str, PaperSize] = {
    "A4": A4,
    "A5": A5,
}


def get_paper_size(name: str) -> PaperSize:
    """
    Get paper size by catalog name (case-insensitive).
    
    Args:
        name: Paper name like "A4" or "a5"
        
    Returns:
        PaperSize for the name
        
    Raises:
        UnknownPaperSizeError: If name is not in PAPER_SIZES
    """
    key = (name or "").strip().upper()
    try:
        return PAPER_SIZES[key]
    except KeyError:
        raise UnknownPaperSizeError(
            f"Unknown paper size {name!r}; expected one of {sorted(PAPER_SIZES)}"
        ) from None
