"""Version resolution for package metadata."""

from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _package_version

try:
    __version__ = _package_version("adf2mp3")
except _PackageNotFoundError:
    __version__ = "0.0.0"


__all__ = ["__version__"]
