"""
Exposes the version of mapprojection
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

# setup.py reads the same file
_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _read_version_file() -> str | None:
    """Fallback when running from a source checkout that was never installed"""
    if _VERSION_FILE.is_file():
        return _VERSION_FILE.read_text(encoding='utf-8').strip()

    return None


try:
    __version__ = version('mapprojection')
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ['__version__']
