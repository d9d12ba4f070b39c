"""Feeds accumulated filesystem events into an ImageController."""

from pathlib import Path

from ...utils.is_image_file import is_image_file
from ..vault._filesystem._constants import SKIP_DIRS
from .FilesystemEvents import FilesystemEvents
from .ImageController import ImageController


def _relative(path: str, vault_path: Path) -> str | None:
    try:
        rel = Path(path).relative_to(vault_path)
    except ValueError:
        return None
    if not rel.parts or rel.parts[0] in SKIP_DIRS:
        return None
    return rel.as_posix()


def _process_events(controller: ImageController, events: FilesystemEvents) -> list[str]:
    """Apply one batch of events and return the paths of auto-renamed images.

    Edited or new notes become the active note and have their new text queued
    for the link-removal check. New images are then offered to auto-rename.
    """
    if events.is_empty():
        return []
    backend = controller.backend
    vault_path = backend.vault_path
    backend.refresh()

    for src, dest in events.moved:
        old, new = _relative(src, vault_path), _relative(dest, vault_path)
        if old is not None and new is not None:
            controller.tracker.rename_document(old, new)

    images: list[str] = []
    for path in dict.fromkeys(events.modified + events.created):
        rel = _relative(path, vault_path)
        if rel is None or not backend.exists(rel):
            continue
        extension = rel.rpartition(".")[2]
        if extension.lower() == "md":
            if controller.tracker.get_cached(rel) is None:
                controller.open_document(rel)
            else:
                controller.active_document = rel
                controller.handle_editor_change(rel, backend.read(rel))
        elif path in events.created and is_image_file(extension):
            images.append(rel)

    renamed = []
    for rel in images:
        new_path = controller.handle_file_created(rel)
        if new_path is not None:
            renamed.append(new_path)
    return renamed
