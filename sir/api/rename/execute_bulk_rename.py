"""Bulk rename execution (UNO: single function)."""

import logging

from ..vault._AbstractBackend import _AbstractBackend
from .BulkRenameItem import BulkRenameItem
from .BulkRenameResult import BulkRenameResult

logger = logging.getLogger(__name__)


def _sibling(item: BulkRenameItem, name: str) -> str:
    file_name = f"{name}.{item.file.extension}" if item.file.extension else name
    return f"{item.file.parent}/{file_name}" if item.file.parent else file_name


def execute_bulk_rename(backend: _AbstractBackend, items: list[BulkRenameItem]) -> BulkRenameResult:
    """Rename every selected item, continuing past failures.

    When the proposed name is taken, ``" 1"``, ``" 2"``, ... is appended until
    a free name is found. Items whose name would not change are skipped.
    """
    result = BulkRenameResult()
    for item in items:
        if not item.selected or item.current_name == item.new_name:
            continue
        try:
            new_path = _sibling(item, item.new_name)
            counter = 1
            while backend.exists(new_path):
                new_path = _sibling(item, f"{item.new_name} {counter}")
                counter += 1
            backend.rename(item.file.path, new_path)
            result.success += 1
        except Exception as exc:
            logger.warning(f"Failed to rename {item.file.path}: {exc}")
            result.failed += 1
            result.errors.append(f"Failed to rename {item.current_name}: {exc}")
    return result
