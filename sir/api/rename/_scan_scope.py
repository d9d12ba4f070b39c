from ..vault._AbstractBackend import _AbstractBackend
from ._constants import BulkRenameScope
from .ImageInfo import ImageInfo
from .scan_images_in_note import scan_images_in_note
from .scan_images_in_vault import scan_images_in_vault


def _scan_scope(backend: _AbstractBackend, scope: BulkRenameScope, note: str | None) -> list[ImageInfo]:
    if scope == "note":
        if not note:
            raise ValueError("--note is required when scope is 'note'")
        return scan_images_in_note(backend, note)
    if scope == "vault":
        return scan_images_in_vault(backend)
    raise ValueError(f"Unknown scope: {scope!r}")
