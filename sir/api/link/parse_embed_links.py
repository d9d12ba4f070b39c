"""Embed image link parser (UNO: single function)."""

from ._constants import EMBED_PATTERN
from ._embed_link_from_match import _embed_link_from_match
from .ImageLink import ImageLink


def parse_embed_links(text: str) -> list[ImageLink]:
    """Extract ``![[image.ext|caption|size]]`` links whose target has an image extension.

    Args:
        text: Document content to parse

    Returns:
        ImageLink objects in order of appearance
    """
    return [_embed_link_from_match(match) for match in EMBED_PATTERN.finditer(text)]
