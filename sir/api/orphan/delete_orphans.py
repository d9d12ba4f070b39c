"""Orphan deletion (UNO: single function)."""

import logging

from ..vault._AbstractBackend import _AbstractBackend
from .OrphanActionResult import OrphanActionResult
from .OrphanedImage import OrphanedImage

logger = logging.getLogger(__name__)


def delete_orphans(backend: _AbstractBackend, images: list[OrphanedImage]) -> OrphanActionResult:
    """Move the selected orphans to the trash, continuing past failures."""
    result = OrphanActionResult()
    for image in images:
        if not image.selected:
            continue
        try:
            backend.trash(image.file.path)
            result.success += 1
        except Exception as exc:
            logger.error(f"Failed to trash {image.file.path}: {exc}")
            result.failed += 1
            result.errors.append(f"{image.file.name}: {exc}")
    return result
