"""Inline markdown image parser (UNO: single function)."""

from ._constants import INLINE_PATTERN, unescape_caption
from .ImageLink import ImageLink
from .SyntaxKind import SyntaxKind


def parse_inline_links(text: str) -> list[ImageLink]:
    """Extract ``![alt](path "title")`` images.

    The alt text becomes the caption; the optional title is recognized but not kept.
    Paths are returned as written, percent-escapes included.
    """
    return [
        ImageLink(
            full_match=match.group(0),
            file_path=match.group(2),
            caption=unescape_caption(match.group(1)),
            size=None,
            kind=SyntaxKind.INLINE,
            start=match.start(),
            end=match.end(),
        )
        for match in INLINE_PATTERN.finditer(text)
    ]
