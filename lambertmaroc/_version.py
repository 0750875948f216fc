"""Version of the installed lambertmaroc distribution"""

__all__ = ['__version__']

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_VERSION_FILE = Path(__file__).resolve().parent.parent / 'VERSION'

try:
    __version__ = version('lambertmaroc')
except PackageNotFoundError:
    # Source checkout without installed metadata
    try:
        __version__ = _VERSION_FILE.read_text(encoding='utf-8').strip().lstrip('v')
    except OSError:
        __version__ = '0.0.0'
