"""Caption removal (UNO: single function)."""

from .find_image_link import find_image_link
from .set_caption import set_caption


def remove_caption(text: str, target: str) -> str:
    """Clear the caption of the link to ``target``, keeping its size.

    Links that already have no caption are left byte-for-byte untouched.
    """
    link = find_image_link(text, target)
    if link is None or link.caption is None:
        return text
    return set_caption(text, target, None)
