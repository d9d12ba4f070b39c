"""Combined image link parser (UNO: single function)."""

from .ImageLink import ImageLink
from .parse_embed_links import parse_embed_links
from .parse_inline_links import parse_inline_links


def parse_image_links(text: str) -> list[ImageLink]:
    """Extract embed and inline image links, ordered by start offset."""
    links = parse_embed_links(text) + parse_inline_links(text)
    return sorted(links, key=lambda link: link.start)
