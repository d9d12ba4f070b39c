"""Extension-less embed parser (UNO: single function)."""

from ._constants import BARE_EMBED_PATTERN
from ._embed_link_from_match import _embed_link_from_match
from .ImageLink import ImageLink


def parse_bare_embed_links(text: str) -> list[ImageLink]:
    """Extract every ``![[target|caption|size]]`` embed, with or without an extension.

    Only used as the lookup fallback for shorthand embeds such as ``![[Holiday 2]]``;
    on its own it would also match note and PDF embeds.
    """
    return [_embed_link_from_match(match) for match in BARE_EMBED_PATTERN.finditer(text)]
