"""
Module: output.renderer

Purpose:
    Render a LayoutResult to PDF using ReportLab.
    Each sheet becomes two PDF pages: the content face followed by the
    outline face, ready for duplex printing.

Key Functions:
    - render_to_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
    - layout.models: LayoutResult, FacePlan

Notes:
    Layout coordinates are millimeters from the top-left corner. This
    module owns the mm -> point conversion and the flip to PDF's
    bottom-left origin.

Used By:
    - controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from binder_toolkit.common.thresholds import RENDERING
from binder_toolkit.common.units import mm_to_pt
from binder_toolkit.layout.instructions import (
    CircleBorder,
    DrawInstruction,
    ImagePlacement,
    LineSegment,
    RectangleBorder,
)
from binder_toolkit.layout.models import FacePlan, LayoutResult, SheetPlan

logger = logging.getLogger(__name__)


def render_to_pdf(layout: LayoutResult, output_path: Path) -> None:
    """
    Render layout result to PDF file.

    Args:
        layout: Layout result from the planner
        output_path: Path to write PDF

    Raises:
        IOError: If PDF cannot be written

    Example:
        >>> render_to_pdf(layout, Path("output/binder.pdf"))
    """
    output_path = Path(output_path)
    if layout.sheet_count == 0:
        logger.warning("Empty layout, creating empty PDF")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    c = canvas.Canvas(str(output_path))

    for sheet, face in layout.faces:
        c.setPageSize((mm_to_pt(sheet.width), mm_to_pt(sheet.height)))
        _render_face(c, sheet, face)
        c.showPage()

    c.save()

    logger.info(f"Rendered {layout.page_count} pages ({layout.sheet_count} sheets) to {output_path}")


def _render_face(c: canvas.Canvas, sheet: SheetPlan, face: FacePlan) -> None:
    page_height_pt = mm_to_pt(sheet.height)

    c.saveState()
    c.setLineWidth(RENDERING.stroke_width_pt)
    c.setStrokeGray(RENDERING.stroke_gray)

    for instruction in face.instructions:
        _draw(c, instruction, page_height_pt)

    c.restoreState()


def _draw(c: canvas.Canvas, instruction: DrawInstruction, page_height_pt: float) -> None:
    if isinstance(instruction, ImagePlacement):
        _draw_image(c, instruction, page_height_pt)
    elif isinstance(instruction, RectangleBorder):
        c.rect(
            mm_to_pt(instruction.x),
            _transform_y(page_height_pt, instruction.y, instruction.height),
            mm_to_pt(instruction.width),
            mm_to_pt(instruction.height),
            stroke=1,
            fill=0,
        )
    elif isinstance(instruction, CircleBorder):
        c.circle(
            mm_to_pt(instruction.cx),
            _transform_y(page_height_pt, instruction.cy),
            mm_to_pt(instruction.radius),
            stroke=1,
            fill=0,
        )
    elif isinstance(instruction, LineSegment):
        c.line(
            mm_to_pt(instruction.x1),
            _transform_y(page_height_pt, instruction.y1),
            mm_to_pt(instruction.x2),
            _transform_y(page_height_pt, instruction.y2),
        )
    else:
        raise TypeError(f"Unknown draw instruction: {instruction!r}")


def _draw_image(c: canvas.Canvas, placement: ImagePlacement, page_height_pt: float) -> None:
    x_pt = mm_to_pt(placement.x)
    y_pt = _transform_y(page_height_pt, placement.y, placement.height)
    width_pt = mm_to_pt(placement.width)
    height_pt = mm_to_pt(placement.height)

    if placement.image_ref is None:
        logger.warning(f"Page {placement.page_id} has no image, drawing placeholder")
        c.saveState()
        c.setStrokeGray(RENDERING.placeholder_gray)
        c.rect(x_pt, y_pt, width_pt, height_pt, stroke=1, fill=0)
        c.restoreState()
        return

    c.drawImage(
        _pil_to_reader(placement.image_ref),
        x_pt,
        y_pt,
        width=width_pt,
        height=height_pt,
        mask="auto",
    )


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Args:
        img: PIL Image object

    Returns:
        ImageReader for use with ReportLab
    """
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return ImageReader(buf)


def _transform_y(page_height_pt: float, y_mm_top: float, height_mm: float = 0.0) -> float:
    """
    Convert a top-down mm Y coordinate to bottom-up PDF points.

    For boxes pass the box height so the result is the bottom edge;
    for points leave it at zero.

    Args:
        page_height_pt: Page height in points
        y_mm_top: Y position from top in mm
        height_mm: Height of element in mm

    Returns:
        Y position from bottom in points
    """
    return page_height_pt - mm_to_pt(y_mm_top) - mm_to_pt(height_mm)
