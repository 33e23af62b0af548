"""
Module: controller

Purpose:
    Orchestrate the complete binder build pipeline.
    Load -> Assign sides -> Plan -> Render

Key Functions:
    - build_binder_pdf(): Plan and render existing content pages
    - build_from_files(): Load files, then build

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Notes:
    Configuration errors (unknown standard, degenerate content area)
    are not wrapped; they propagate with their own type.

Used By:
    - __main__: Command line
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

from .config import BuilderConfig
from .content import ContentLoadError, PageCollection, PageFactory, load_files
from .layout import ContentPage, PackingMode, PageSide, plan_layout
from .output import render_to_pdf

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        output_pdf: Path to generated PDF
        sheet_count: Physical sheets
        page_count: PDF pages (content and outline faces)
        packing_mode: Single or 2-up
        warnings: Any warnings during build

    Example:
        >>> result = build_binder_pdf(config, pages)
        >>> print(f"Generated {result.page_count} pages on {result.sheet_count} sheets")
    """
    output_pdf: Path
    sheet_count: int
    page_count: int
    packing_mode: PackingMode
    warnings: tuple[str, ...]


def build_binder_pdf(config: BuilderConfig, pages: Sequence[ContentPage]) -> BuildResult:
    """
    Plan and render content pages for a binder.

    Args:
        config: Build configuration
        pages: Content pages in print order

    Returns:
        BuildResult with output path and counts

    Raises:
        BuildError: If there are no pages or the PDF cannot be written
        DegenerateAreaError: If the standard leaves no content area
    """
    if not pages:
        raise BuildError("No content pages to build")

    start_time = time.perf_counter()
    standard = config.standard
    paper = config.paper_size

    logger.info(f"Starting build: {len(pages)} pages, {standard.name} on {paper.name}")

    layout = plan_layout(pages, standard, paper, padding=config.padding)

    try:
        render_to_pdf(layout, config.output_path)
    except OSError as e:
        raise BuildError(f"Failed to write {config.output_path}: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Build finished in {elapsed:.2f}s")

    return BuildResult(
        output_pdf=Path(config.output_path),
        sheet_count=layout.sheet_count,
        page_count=layout.page_count,
        packing_mode=PackingMode.TWO_UP if layout.two_up else PackingMode.SINGLE,
        warnings=tuple(layout.warnings),
    )


def build_from_files(
    config: BuilderConfig,
    paths: Iterable[Path],
    side: Optional[PageSide] = None,
) -> BuildResult:
    """
    Load image and PDF files and build a binder PDF from them.

    Args:
        config: Build configuration
        paths: Image and PDF files in print order
        side: Side for every page; None gives the alternating default
            (first page left)

    Raises:
        BuildError: If loading fails or no supported content was found
    """
    factory = PageFactory(dpi=config.content_dpi)
    try:
        loaded = load_files(paths, factory)
    except ContentLoadError as e:
        raise BuildError(f"Failed to load content: {e}") from e

    if not loaded:
        raise BuildError("No supported content found in input files")

    if side is not None:
        loaded = [page.with_side(side) for page in loaded]

    collection = PageCollection(loaded)
    return build_binder_pdf(config, collection.pages)
