"""Image link lookup (UNO: single function)."""

from .ImageLink import ImageLink
from .normalize_target import normalize_target
from .parse_bare_embed_links import parse_bare_embed_links
from .parse_image_links import parse_image_links


def _without_extension(name: str) -> str:
    stem, dot, _ = name.rpartition(".")
    return stem if dot and stem else name


def find_image_link(text: str, target: str) -> ImageLink | None:
    """Locate the first link in ``text`` that points at ``target``.

    Targets are compared by file name only, after URL-decoding and lowercasing,
    so ``assets/My%20Image.PNG`` matches ``my image.png``. When no link with an
    extension matches, extension-less embeds (``![[My Image]]``) are matched
    against the target's name without extension. A match with extension always
    wins over the fallback.

    Returns:
        The located link, or None if the text has no link to ``target``
    """
    wanted = normalize_target(target)
    if not wanted:
        return None

    for link in parse_image_links(text):
        if normalize_target(link.file_path) == wanted:
            return link

    wanted_stem = _without_extension(wanted)
    for link in parse_bare_embed_links(text):
        if normalize_target(link.file_path) == wanted_stem:
            return link
    return None
