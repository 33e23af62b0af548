"""
Tests for content ingestion (Pillow images, PyMuPDF pages).
"""

import fitz
import pytest
from PIL import Image

from binder_toolkit.content import ContentLoadError, PageFactory, is_supported, load_files, load_image, load_pdf
from binder_toolkit.layout import ContentKind


@pytest.fixture
def sample_pdf(tmp_path):
    """Two-page A5 PDF (419.5 x 595.3 pt)."""
    path = tmp_path / "sample.pdf"
    doc = fitz.open()
    for _ in range(2):
        page = doc.new_page(width=419.53, height=595.28)
        page.insert_text((72, 72), "Hello binder")
    doc.save(str(path))
    doc.close()
    return path


class TestLoadImage:

    def test_load_image_reads_size(self, sample_image):
        page = load_image(sample_image)

        assert page.kind is ContentKind.IMAGE
        assert (page.pixel_width, page.pixel_height) == (300, 450)
        assert page.source_name == "sample.png"
        assert page.image.size == (300, 450)

    def test_palette_image_converted_to_rgb(self, tmp_path):
        path = tmp_path / "palette.gif"
        Image.new("P", (20, 10)).save(path)

        page = load_image(path)

        assert page.image.mode in ("RGB", "RGBA")

    def test_corrupt_image_raises(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_bytes(b"not an image")

        with pytest.raises(ContentLoadError, match="broken.png"):
            load_image(path)

    def test_missing_image_raises(self, tmp_path):
        with pytest.raises(ContentLoadError):
            load_image(tmp_path / "missing.png")


class TestLoadPdf:

    def test_one_page_per_pdf_page(self, sample_pdf):
        pages = load_pdf(sample_pdf)

        assert len(pages) == 2
        assert all(p.kind is ContentKind.DOCUMENT_PAGE for p in pages)
        assert [p.source_name for p in pages] == ["sample.pdf#1", "sample.pdf#2"]

    def test_rendered_at_content_density(self, sample_pdf):
        """A5 rendered at 150 dpi maps back to roughly 148 x 210 mm."""
        page = load_pdf(sample_pdf)[0]
        width_mm, height_mm = page.size_mm()

        assert width_mm == pytest.approx(148, abs=0.5)
        assert height_mm == pytest.approx(210, abs=0.5)

    def test_missing_pdf_raises(self, tmp_path):
        with pytest.raises(ContentLoadError, match="missing.pdf"):
            load_pdf(tmp_path / "missing.pdf")


class TestLoadFiles:

    def test_mixed_inputs_in_order(self, sample_image, sample_pdf):
        pages = load_files([sample_image, sample_pdf])

        assert [p.kind for p in pages] == [
            ContentKind.IMAGE, ContentKind.DOCUMENT_PAGE, ContentKind.DOCUMENT_PAGE,
        ]

    def test_shared_factory_gives_unique_ids(self, sample_image, sample_pdf):
        factory = PageFactory()

        pages = load_files([sample_image, sample_pdf], factory)

        assert len({p.id for p in pages}) == 3

    def test_unsupported_files_skipped_with_warning(self, tmp_path, sample_image, caplog):
        notes = tmp_path / "notes.txt"
        notes.write_text("hello")

        pages = load_files([notes, sample_image])

        assert len(pages) == 1
        assert "Unsupported file type: notes.txt" in caplog.text

    def test_is_supported(self, tmp_path):
        assert is_supported(tmp_path / "a.PNG")
        assert is_supported(tmp_path / "a.pdf")
        assert not is_supported(tmp_path / "a.docx")
