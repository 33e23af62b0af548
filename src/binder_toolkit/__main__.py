"""
Command line entry point.

Usage:
    python -m binder_toolkit scans/*.png notes.pdf -o binder.pdf --binder a5-20-hole --paper A4
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from binder_toolkit import __version__
from binder_toolkit.binders import UnknownStandardError, list_standards, supported_standard_ids
from binder_toolkit.common.paper import PAPER_SIZES, UnknownPaperSizeError
from binder_toolkit.config import BuilderConfig
from binder_toolkit.controller import BuildError, build_from_files
from binder_toolkit.layout import DegenerateAreaError, PageSide

logger = logging.getLogger("binder_toolkit")

SIDE_CHOICES = ("alternate", PageSide.LEFT.value, PageSide.RIGHT.value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binder-toolkit",
        description="Lay out images and PDF pages for punched binders with a mirrored cutting outline.",
    )
    parser.add_argument("inputs", nargs="*", type=Path, help="Image or PDF files")
    parser.add_argument("-o", "--output", type=Path, default=Path("binder.pdf"))
    parser.add_argument("--binder", default="a5-20-hole", help="Binder standard id")
    parser.add_argument("--paper", default="A4", choices=sorted(PAPER_SIZES))
    parser.add_argument("--no-padding", action="store_true", help="Drop the 5mm clearance next to the holes")
    parser.add_argument("--side", default="alternate", choices=SIDE_CHOICES)
    parser.add_argument("--list-binders", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_binders:
        for standard in list_standards():
            print(f"{standard.id:<20} {standard.name} ({standard.hole_count} holes, {standard.native_size.name})")
        return 0

    if not args.inputs:
        parser.error("no input files given")

    try:
        config = BuilderConfig(
            binder_id=args.binder,
            paper=args.paper,
            padding=not args.no_padding,
            output_path=args.output,
        )
        side = None if args.side == "alternate" else PageSide(args.side)
        result = build_from_files(config, args.inputs, side=side)
    except UnknownStandardError as e:
        logger.error(f"{e}. Known binders: {', '.join(supported_standard_ids())}")
        return 1
    except (UnknownPaperSizeError, DegenerateAreaError, BuildError) as e:
        logger.error(str(e))
        return 1

    for warning in result.warnings:
        logger.warning(warning)
    logger.info(
        f"Wrote {result.output_pdf} ({result.page_count} pages, "
        f"{result.sheet_count} sheets, {result.packing_mode.value})"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
