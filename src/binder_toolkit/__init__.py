"""Top-level package for the Binder Toolkit.

Provides subpackages:
- binder_toolkit.binders – binder standard catalog and hole formulas
- binder_toolkit.layout – content areas, sheet planning, cutting outlines
- binder_toolkit.content – image/PDF ingestion and page editing
- binder_toolkit.output – PDF rendering
"""


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("binder-toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

from .config import BuilderConfig
from .controller import BuildError, BuildResult, build_binder_pdf, build_from_files

__all__ = [
    "__version__",
    "BuilderConfig",
    "BuildError",
    "BuildResult",
    "build_binder_pdf",
    "build_from_files",
]
