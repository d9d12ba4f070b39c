"""Image reference syntax kinds."""

from enum import Enum


class SyntaxKind(str, Enum):
    """Which reference syntax an ImageLink was written in."""

    EMBED = "embed"
    INLINE = "inline"
