"""Single source of truth for the snapgrid version."""

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).parent.parent.parent / "pyproject.toml"


def get_version() -> str:
    """Version from the source checkout's pyproject.toml, else the installed metadata.

    Returns ``"0.0.0"`` only when neither exists, e.g. when the package is
    imported from an unpacked tree that was never installed.
    """
    if _PYPROJECT.exists():
        content = _PYPROJECT.read_text(encoding="utf-8")
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)
    try:
        return _metadata_version("snapgrid")
    except PackageNotFoundError:
        return "0.0.0"
