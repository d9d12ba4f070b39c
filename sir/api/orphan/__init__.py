"""Detection and clean-up of images no document references."""

from .OrphanActionResult import OrphanActionResult
from .OrphanedImage import OrphanedImage
from .OrphanScanResult import OrphanScanResult
from .delete_orphans import delete_orphans
from .move_orphans import move_orphans
from .scan_orphans import scan_orphans

__all__ = [
    "OrphanActionResult",
    "OrphanScanResult",
    "OrphanedImage",
    "delete_orphans",
    "move_orphans",
    "scan_orphans",
]
