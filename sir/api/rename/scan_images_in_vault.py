"""Vault image scan (UNO: single function)."""

from ...utils.is_image_file import is_image_file
from ..vault._AbstractBackend import _AbstractBackend
from ..vault.VaultFile import VaultFile
from .ImageInfo import ImageInfo
from .is_generic_name import is_generic_name


def scan_images_in_vault(backend: _AbstractBackend) -> list[ImageInfo]:
    """List every image in the vault.

    Each image is attributed to the first markdown note (in vault order) that
    embeds it, or to no note at all.
    """
    first_note: dict[str, VaultFile] = {}
    for document in backend.iter_documents():
        if document.extension.lower() != "md":
            continue
        for target in backend.get_embeds(document.path):
            linked = backend.resolve_link(target, document.path)
            if linked is not None:
                first_note.setdefault(linked.path, document)

    return [
        ImageInfo(file=file, source_note=first_note.get(file.path), is_generic=is_generic_name(file.basename))
        for file in backend.iter_files()
        if is_image_file(file.extension)
    ]
