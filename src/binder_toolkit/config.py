"""
Module: config

Purpose:
    Configuration dataclass for the binder build pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - BuilderConfig: Main configuration for building a binder PDF

Used By:
    - controller: Main build controller
    - __main__: Command line
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from binder_toolkit.binders.models import BinderStandard
from binder_toolkit.binders.registry import lookup_standard
from binder_toolkit.common.paper import PaperSize, get_paper_size
from binder_toolkit.common.thresholds import GEOMETRY


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building a binder PDF (immutable).

    Page sides are not configured here: each ContentPage carries its own.

    Attributes:
        binder_id: Binder standard id like "a5-20-hole"
        paper: Stock paper size name ("A4" or "A5")
        padding: Add 5mm clearance between content and hole margin
        output_path: PDF file to write
        content_dpi: Assumed density of ingested rasters

    Raises:
        UnknownStandardError: If binder_id is not in the catalog
        UnknownPaperSizeError: If paper is not in the catalog

    Example:
        >>> config = BuilderConfig(binder_id="a5-6-hole-filofax", paper="A4")
        >>> config.standard.hole_count
        6
    """

    binder_id: str
    paper: str = "A4"
    padding: bool = True
    output_path: Path = Path("binder.pdf")
    content_dpi: int = GEOMETRY.content_dpi

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        lookup_standard(self.binder_id)
        get_paper_size(self.paper)
        if self.content_dpi <= 0:
            raise ValueError(f"content_dpi must be positive: {self.content_dpi}")

    @property
    def standard(self) -> BinderStandard:
        return lookup_standard(self.binder_id)

    @property
    def paper_size(self) -> PaperSize:
        return get_paper_size(self.paper)
