"""Caption rewrite (UNO: single function)."""

from .build_image_link import build_image_link
from .find_image_link import find_image_link


def set_caption(text: str, target: str, caption: str | None) -> str:
    """Return ``text`` with the caption of the link to ``target`` replaced.

    Only the located link's span changes; its syntax kind and size are kept.
    A blank caption clears it. Text without a link to ``target`` is returned unchanged.
    """
    link = find_image_link(text, target)
    if link is None:
        return text

    new_caption = (caption or "").strip() or None
    replacement = build_image_link(link.file_path, new_caption, link.size, link.kind)
    return text[: link.start] + replacement + text[link.end :]
