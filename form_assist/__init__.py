"""Form discovery, analysis and autofill for live web pages."""

from importlib import metadata

try:
    __version__ = metadata.version("form-assist")
except metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
