"""Orphan relocation (UNO: single function)."""

import logging

from ..vault._AbstractBackend import _AbstractBackend
from ..vault.ensure_folder_exists import ensure_folder_exists
from .OrphanActionResult import OrphanActionResult
from .OrphanedImage import OrphanedImage

logger = logging.getLogger(__name__)


def move_orphans(backend: _AbstractBackend, images: list[OrphanedImage], target_folder: str) -> OrphanActionResult:
    """Move the selected orphans into ``target_folder`` (created if missing).

    Errors creating the folder propagate; errors moving an image are recorded
    per image.
    """
    folder = target_folder.strip("/")
    ensure_folder_exists(backend, folder)

    result = OrphanActionResult()
    for image in images:
        if not image.selected:
            continue
        try:
            backend.rename(image.file.path, f"{folder}/{image.file.name}" if folder else image.file.name)
            result.success += 1
        except Exception as exc:
            logger.warning(f"Failed to move {image.file.path} to {folder}: {exc}")
            result.failed += 1
            result.errors.append(f"{image.file.name}: {exc}")
    return result
