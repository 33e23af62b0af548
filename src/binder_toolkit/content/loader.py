"""
Module: content.loader

Purpose:
    Content source: decode image files and rasterize PDF pages into
    ContentPages of known pixel size.

Key Functions:
    - load_image(): One image file -> one ContentPage
    - load_pdf(): One PDF -> one ContentPage per page
    - load_files(): Dispatch a list of paths by file type

Key Classes:
    - ContentLoadError: A supported file could not be decoded

Dependencies:
    - PIL: Image decoding
    - fitz (PyMuPDF): PDF rasterization

Notes:
    PDF pages are rendered at the content density (150 dpi by default),
    so a rendered page maps back to its true physical size.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

import fitz
from PIL import Image, ImageOps, UnidentifiedImageError

from binder_toolkit.common.thresholds import GEOMETRY
from binder_toolkit.layout.models import ContentKind, ContentPage

from .pages import PageFactory

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff", ".webp"})
PDF_SUFFIXES = frozenset({".pdf"})


class ContentLoadError(Exception):
    """A supported file could not be read or decoded."""
    pass


def is_supported(path: Path) -> bool:
    suffix = Path(path).suffix.lower()
    return suffix in IMAGE_SUFFIXES or suffix in PDF_SUFFIXES


def load_image(path: Path, factory: Optional[PageFactory] = None) -> ContentPage:
    """
    Decode an image file into a ContentPage.

    EXIF orientation is applied and palette/CMYK images are converted to
    RGB (RGBA when transparent).

    Args:
        path: Image file
        factory: Page factory owning the id counter

    Returns:
        ContentPage of kind IMAGE

    Raises:
        ContentLoadError: If the file cannot be opened or decoded
        InvalidContentDimensionsError: If the decoded image is empty
    """
    path = Path(path)
    factory = factory or PageFactory()

    try:
        with Image.open(path) as opened:
            opened.load()
            image = ImageOps.exif_transpose(opened)
    except (OSError, UnidentifiedImageError, ValueError) as e:
        raise ContentLoadError(f"Failed to load image {path}: {e}") from e

    image = _normalise_mode(image)
    page = factory.from_image(image, kind=ContentKind.IMAGE, source_name=path.name)
    logger.debug(f"Loaded image {path.name} ({image.width}x{image.height}px)")
    return page


def load_pdf(
    path: Path,
    factory: Optional[PageFactory] = None,
    *,
    dpi: int = GEOMETRY.content_dpi,
) -> List[ContentPage]:
    """
    Rasterize every page of a PDF.

    Args:
        path: PDF file
        factory: Page factory owning the id counter
        dpi: Render density

    Returns:
        One ContentPage of kind DOCUMENT_PAGE per PDF page, in page order

    Raises:
        ContentLoadError: If the document cannot be opened or rendered
    """
    path = Path(path)
    factory = factory or PageFactory(dpi=dpi)
    matrix = fitz.Matrix(dpi / 72.0, dpi / 72.0)
    pages: List[ContentPage] = []

    try:
        with fitz.open(str(path)) as doc:
            for page_number, pdf_page in enumerate(doc, start=1):
                pix = pdf_page.get_pixmap(matrix=matrix, alpha=False)
                image = Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
                pages.append(
                    factory.from_image(
                        image,
                        kind=ContentKind.DOCUMENT_PAGE,
                        source_name=f"{path.name}#{page_number}",
                    )
                )
    except (OSError, RuntimeError, ValueError) as e:
        raise ContentLoadError(f"Failed to render PDF {path}: {e}") from e

    logger.info(f"Rendered {len(pages)} pages from {path.name} at {dpi} dpi")
    return pages


def load_files(
    paths: Iterable[Path],
    factory: Optional[PageFactory] = None,
) -> List[ContentPage]:
    """
    Load all supported files in order.

    Unsupported file types are skipped with a warning.

    Raises:
        ContentLoadError: If a supported file fails to load
    """
    factory = factory or PageFactory()
    pages: List[ContentPage] = []

    for path in map(Path, paths):
        suffix = path.suffix.lower()
        if suffix in PDF_SUFFIXES:
            pages.extend(load_pdf(path, factory, dpi=factory.dpi))
        elif suffix in IMAGE_SUFFIXES:
            pages.append(load_image(path, factory))
        else:
            logger.warning(f"Unsupported file type: {path.name}")

    logger.info(f"Loaded {len(pages)} content pages")
    return pages


def _normalise_mode(image: Image.Image) -> Image.Image:
    if image.mode in ("RGB", "RGBA", "L"):
        return image
    has_alpha = "A" in image.getbands() or "transparency" in image.info
    return image.convert("RGBA" if has_alpha else "RGB")
