"""Top-level package for flashbang.

Provides subpackages:
- flashbang.core – word/category/question models, record validation and serialization
- flashbang.scheduler – SM-2 spaced-repetition scheduler
- flashbang.session – quiz session builder
- flashbang.study – caller-owned quiz, flashcard and dashboard state
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
        return pkg_version("flashbang")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
