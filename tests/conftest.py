import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import binder_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from binder_toolkit.content.pages import PageFactory


# Common test fixtures
@pytest.fixture
def page_factory():
    """Fresh page factory per test."""
    return PageFactory()


@pytest.fixture
def make_page(page_factory):
    """Factory to create content pages backed by a small blank image."""
    def _create(width: int = 300, height: int = 600, side=None):
        img = Image.new("RGB", (width, height), color="white")
        return page_factory.from_image(img, side=side)
    return _create


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image."""
    img = Image.new("RGB", (300, 450), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path
