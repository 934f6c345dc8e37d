"""Format the staged content of git files without losing unstaged edits."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("formatstaged")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
