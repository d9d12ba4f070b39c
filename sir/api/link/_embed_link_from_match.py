import re

from ._constants import unescape_caption
from .ImageLink import ImageLink
from .SyntaxKind import SyntaxKind


def _embed_link_from_match(match: re.Match[str]) -> ImageLink:
    return ImageLink(
        full_match=match.group(0),
        file_path=match.group(1).strip(),
        caption=unescape_caption(match.group(2)),
        size=match.group(3) or None,
        kind=SyntaxKind.EMBED,
        start=match.start(),
        end=match.end(),
    )
