"""Top-level package for selection_list.

An immutable ordered sequence with exactly one selected element, for
tabs, pagination, slideshows and similar cursor-driven views.

Provides subpackages:
- selection_list.core.models – SelectionList and its function forms
- selection_list.core.schemas – dict validation
- selection_list.core.utils – dict / JSON-string serialization
"""

DISTRIBUTION_NAME = "selection-list"


def _get_version() -> str:
    """[project].version from a source checkout, else the installed metadata."""
    import tomllib
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    from pathlib import Path

    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if pyproject.is_file():
        with pyproject.open("rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == DISTRIBUTION_NAME and "version" in project:
            return str(project["version"])

    try:
        return pkg_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()

from .core import *  # noqa: E402,F401,F403
from .core import __all__ as _core_all  # noqa: E402

__all__: list[str] = ["__version__", *_core_all]
