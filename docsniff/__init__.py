"""Doc-comment presence checks over tokenized source files."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("docsniff")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0-dev"

__all__ = ["__version__"]
