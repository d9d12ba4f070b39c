"""Generic-name classification, bulk rename planning and image renaming."""

from .BulkRenameItem import BulkRenameItem
from .BulkRenamePlanner import BulkRenamePlanner
from .BulkRenameResult import BulkRenameResult
from .ImageInfo import ImageInfo
from .ImageNotFoundError import ImageNotFoundError
from .InvalidFilenameError import InvalidFilenameError
from .execute_bulk_rename import execute_bulk_rename
from .is_generic_name import is_generic_name
from .rename_image import rename_image
from .scan_images_in_note import scan_images_in_note
from .scan_images_in_vault import scan_images_in_vault

__all__ = [
    "BulkRenameItem",
    "BulkRenamePlanner",
    "BulkRenameResult",
    "ImageInfo",
    "ImageNotFoundError",
    "InvalidFilenameError",
    "execute_bulk_rename",
    "is_generic_name",
    "rename_image",
    "scan_images_in_note",
    "scan_images_in_vault",
]
