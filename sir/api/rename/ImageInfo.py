"""ImageInfo model (UNO: single model)."""

from dataclasses import dataclass

from ..vault.VaultFile import VaultFile


@dataclass(frozen=True)
class ImageInfo:
    """An image found by a scan, with the note it is attributed to (if any)."""

    file: VaultFile
    source_note: VaultFile | None
    is_generic: bool
