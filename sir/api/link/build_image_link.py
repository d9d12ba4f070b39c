"""Image link builder (UNO: single function)."""

from ._constants import escape_caption
from .SyntaxKind import SyntaxKind


def build_image_link(
    path: str,
    caption: str | None = None,
    size: str | None = None,
    kind: SyntaxKind = SyntaxKind.EMBED,
) -> str:
    """Render an image reference.

    Embed links keep size in the third pipe segment, leaving an empty caption
    segment (``![[a.png||200]]``) when there is a size but no caption. Inline
    links cannot carry a size, so ``size`` is dropped for them. Backslashes in
    captions are escaped along with the delimiters so the parsers read the
    caption back unchanged.
    """
    if kind is SyntaxKind.INLINE:
        return f"![{escape_caption(caption or '', ']')}]({path})"

    parts = [path]
    if caption:
        parts.append(escape_caption(caption, "|]"))
    if size:
        if not caption:
            parts.append("")
        parts.append(size)
    return "![[" + "|".join(parts) + "]]"
