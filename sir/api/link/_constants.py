"""Compiled image-link grammars."""

import re

from ...utils.constants import IMAGE_EXTENSIONS

# Longest first so "jpeg" is tried before "jpg" and "tiff" before "tif"
_EXTENSIONS = "|".join(sorted(IMAGE_EXTENSIONS, key=len, reverse=True))

# Caption text runs to the next unescaped "|" or "]]"; a lone "]" is caption text
_CAPTION = r"((?:\\.|[^\\|\]\n]|\](?!\]))*)"

# ![[path.ext|caption|size]]
EMBED_PATTERN = re.compile(
    r"!\[\[([^\]|\n]+?\.(?:" + _EXTENSIONS + r"))(?:\|" + _CAPTION + r")?(?:\|(\d+))?\]\]",
    re.IGNORECASE,
)

# ![[path|caption|size]] with any target, extension optional
BARE_EMBED_PATTERN = re.compile(r"!\[\[([^\]|\n]+?)(?:\|" + _CAPTION + r")?(?:\|(\d+))?\]\]")

# ![alt](path "title")
INLINE_PATTERN = re.compile(r'!\[((?:\\.|[^\\\]\n])*)\]\(([^)\s]+)(?:\s+"[^"]*")?\)')

_ESCAPED = re.compile(r"\\([\\|\]])")


def escape_caption(caption: str, specials: str) -> str:
    """Backslash-escape ``\\`` and each character of ``specials`` in caption text."""
    escaped = caption.replace("\\", "\\\\")
    for char in specials:
        escaped = escaped.replace(char, "\\" + char)
    return escaped


def unescape_caption(raw: str | None) -> str | None:
    """Turn the raw caption group into caption text; empty becomes None."""
    if not raw:
        return None
    return _ESCAPED.sub(r"\1", raw)
