"""Event wiring: paste, drop, file creation, editor changes and image context actions."""

from ..rename.ImageNotFoundError import ImageNotFoundError
from ..rename.InvalidFilenameError import InvalidFilenameError
from .Debouncer import Debouncer
from .DeletePrompt import DeletePrompt
from .FilesystemEvents import FilesystemEvents
from .ImageController import ImageController
from .ProcessedImage import ProcessedImage
from .TtlSet import TtlSet

__all__ = [
    "Debouncer",
    "DeletePrompt",
    "FilesystemEvents",
    "ImageController",
    "ImageNotFoundError",
    "InvalidFilenameError",
    "ProcessedImage",
    "TtlSet",
]
