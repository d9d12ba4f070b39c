"""Bulk rename constants."""

import re
from typing import Literal

BulkRenameMode = Literal["replace", "prepend", "pattern"]
ImageFilter = Literal["all", "generic"]
BulkRenameScope = Literal["note", "vault"]

# Names that look auto-generated; checked in order, first hit wins
GENERIC_NAME_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^pasted[-_ ]?image", re.IGNORECASE),
    re.compile(r"^screenshot", re.IGNORECASE),
    re.compile(r"^screen[-_ ]?shot", re.IGNORECASE),
    re.compile(r"^image[-_ ]?\d+$", re.IGNORECASE),  # "image1", not "image of cat"
    re.compile(r"^img[-_ ]?\d+$", re.IGNORECASE),
    re.compile(r"^photo[-_ ]?\d+$", re.IGNORECASE),
    re.compile(r"^clipboard[-_ ]?\d*$", re.IGNORECASE),
    re.compile(r"^\d{8,}"),  # timestamps like 20231105123456
)

DEFAULT_PATTERN = "{note}"
