"""Cursor hit-testing for image links."""

from .ImageLink import ImageLink
from .parse_image_links import parse_image_links


def get_image_link_at_cursor(line: str, pos: int) -> ImageLink | None:
    """Return the image link in ``line`` that spans column ``pos`` (inclusive of both ends)."""
    for link in parse_image_links(line):
        if link.start <= pos <= link.end:
            return link
    return None
