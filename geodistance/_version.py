"""
Resolves the installed version of geodistance
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _source_tree_version() -> str | None:
    """Reads the repo-root VERSION file when running from an uninstalled checkout"""
    if not _VERSION_FILE.is_file():
        return None

    return _VERSION_FILE.read_text(encoding='utf-8').strip()


try:
    __version__ = version('geodistance')
except PackageNotFoundError:
    __version__ = _source_tree_version()

__all__ = ['__version__']
