"""Pair-programming commit message assistant."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("paircommit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
