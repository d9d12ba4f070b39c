from .ImageLink import ImageLink
from .parse_image_links import parse_image_links


def get_first_image_link_in_line(line: str) -> ImageLink | None:
    """Return the first image link in ``line``, if any."""
    links = parse_image_links(line)
    return links[0] if links else None
