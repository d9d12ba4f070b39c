"""Note image scan (UNO: single function)."""

from ...utils.is_image_file import is_image_file
from ..vault._AbstractBackend import _AbstractBackend
from .ImageInfo import ImageInfo
from .is_generic_name import is_generic_name


def scan_images_in_note(backend: _AbstractBackend, note_path: str) -> list[ImageInfo]:
    """List the images embedded in one note, each once, attributed to that note.

    Raises:
        FileNotFoundError: The note does not exist
    """
    note = backend.get_file(note_path)
    if note is None:
        raise FileNotFoundError(f"Note not found: {note_path}")

    images: list[ImageInfo] = []
    seen: set[str] = set()
    for target in backend.get_embeds(note.path):
        linked = backend.resolve_link(target, note.path)
        if linked is None or not is_image_file(linked.extension) or linked.path in seen:
            continue
        seen.add(linked.path)
        images.append(ImageInfo(file=linked, source_note=note, is_generic=is_generic_name(linked.basename)))
    return images
