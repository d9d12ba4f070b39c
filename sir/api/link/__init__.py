"""Image-link parsing and rewriting for embed (``![[...]]``) and inline (``![...](...)``) syntax."""

from .ImageLink import ImageLink
from .SyntaxKind import SyntaxKind
from .build_image_link import build_image_link
from .find_image_link import find_image_link
from .get_first_image_link_in_line import get_first_image_link_in_line
from .get_image_link_at_cursor import get_image_link_at_cursor
from .normalize_target import normalize_target
from .parse_bare_embed_links import parse_bare_embed_links
from .parse_embed_links import parse_embed_links
from .parse_image_links import parse_image_links
from .parse_inline_links import parse_inline_links
from .remove_caption import remove_caption
from .set_caption import set_caption

__all__ = [
    "ImageLink",
    "SyntaxKind",
    "build_image_link",
    "find_image_link",
    "get_first_image_link_in_line",
    "get_image_link_at_cursor",
    "normalize_target",
    "parse_bare_embed_links",
    "parse_embed_links",
    "parse_image_links",
    "parse_inline_links",
    "remove_caption",
    "set_caption",
]
