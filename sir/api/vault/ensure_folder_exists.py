"""Folder creation (UNO: single function)."""

from ._AbstractBackend import _AbstractBackend


def ensure_folder_exists(backend: _AbstractBackend, folder: str) -> None:
    """Create ``folder`` and any missing parents.

    A FileExistsError from a concurrent creator is ignored; other errors propagate.
    """
    current = ""
    for part in folder.strip("/").split("/"):
        if not part:
            continue
        current = f"{current}/{part}" if current else part
        if backend.exists(current):
            continue
        try:
            backend.create_folder(current)
        except FileExistsError:
            pass
