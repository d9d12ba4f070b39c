"""Image target extraction (UNO: single function)."""

from urllib.parse import unquote

from ...utils.is_image_file import is_image_file
from ..link.SyntaxKind import SyntaxKind
from ..link.parse_image_links import parse_image_links


def extract_image_targets(text: str) -> set[str]:
    """Collect the path of every image link in ``text``.

    Only the path takes part, never caption or size, so caption edits leave the
    set unchanged. Inline paths are URL-decoded; embed paths are kept as written.
    """
    targets: set[str] = set()
    for link in parse_image_links(text):
        path = unquote(link.file_path) if link.kind is SyntaxKind.INLINE else link.file_path
        _, dot, extension = path.rpartition(".")
        if dot and is_image_file(extension):
            targets.add(path)
    return targets
