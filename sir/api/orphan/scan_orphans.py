"""Orphan scan (UNO: single function)."""

from ...utils.is_image_file import is_image_file
from ..vault._AbstractBackend import _AbstractBackend
from .OrphanedImage import OrphanedImage
from .OrphanScanResult import OrphanScanResult


def scan_orphans(backend: _AbstractBackend) -> OrphanScanResult:
    """Find images that no note, canvas or drawing embeds.

    The reference index is built once from every document's embeds, then
    each image is checked against it.
    """
    referenced: set[str] = set()
    for document in backend.iter_documents():
        for target in backend.get_embeds(document.path):
            linked = backend.resolve_link(target, document.path)
            if linked is not None:
                referenced.add(linked.path)

    images = [file for file in backend.iter_files() if is_image_file(file.extension)]
    orphaned = [OrphanedImage(file=image, size=image.size) for image in images if image.path not in referenced]
    return OrphanScanResult(
        orphaned=orphaned,
        total_count=len(images),
        referenced_count=len(images) - len(orphaned),
    )
