"""
Module: binders

Purpose:
    Binder standard catalog and hole position formulas.

Key Functions:
    - lookup_standard(): Get a standard by id
    - list_standards(): All catalog entries
    - hole_centers(): Evaluate a hole layout

Key Classes:
    - BinderStandard: Catalog entry
    - EvenSpacedPitch, EvenSpacedSpan, SymmetricGroups: Hole layouts
"""

from .models import (
    BinderStandard,
    EvenSpacedPitch,
    EvenSpacedSpan,
    SymmetricGroups,
    HoleLayout,
)
from .holes import hole_centers
from .registry import (
    lookup_standard,
    list_standards,
    supported_standard_ids,
    UnknownStandardError,
)

__all__ = [
    # Models
    "BinderStandard",
    "EvenSpacedPitch",
    "EvenSpacedSpan",
    "SymmetricGroups",
    "HoleLayout",
    # Evaluator
    "hole_centers",
    # Registry
    "lookup_standard",
    "list_standards",
    "supported_standard_ids",
    "UnknownStandardError",
]
