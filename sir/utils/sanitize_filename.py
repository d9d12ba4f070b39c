"""Filename sanitization for note-derived image names."""

import re
import unicodedata

# Characters that are invalid in filenames across Windows/Mac/Linux
INVALID_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]')
_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_NOT_URL_FRIENDLY = re.compile(r"[^a-zA-Z0-9\s_-]")
_WHITESPACE = re.compile(r"\s+")
_UNDERSCORES = re.compile(r"_+")


def sanitize_filename(name: str, aggressive: bool) -> str:
    """Convert arbitrary text into a filesystem-safe base name.

    Args:
        name: Text to sanitize (typically a note title)
        aggressive: When True, produce a URL-friendly name: accents removed,
            only ASCII letters, digits, underscores and hyphens kept,
            whitespace turned into underscores, lowercased.
            When False, only invalid filesystem characters are removed and
            whitespace runs are collapsed; case and Unicode are preserved.

    Returns:
        The sanitized name. May be empty; callers must check before using it.
    """
    if aggressive:
        text = unicodedata.normalize("NFD", name.strip())
        text = _COMBINING_MARKS.sub("", text)
        text = INVALID_FILENAME_CHARS.sub("", text)
        text = _NOT_URL_FRIENDLY.sub("", text)
        text = _WHITESPACE.sub("_", text)
        text = _UNDERSCORES.sub("_", text)
        return text.strip("_").lower()

    text = INVALID_FILENAME_CHARS.sub("", name)
    return _WHITESPACE.sub(" ", text).strip()
