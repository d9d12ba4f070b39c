"""SIR utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .expand_path import expand_path
from .extract_image_path_from_src import extract_image_path_from_src
from .format_timestamp import format_timestamp
from .get_extension_from_mime import get_extension_from_mime
from .get_logger import get_logger
from .is_image_file import is_image_file
from .remove_note_suffixes import remove_note_suffixes
from .sanitize_filename import sanitize_filename

__all__ = [
    "expand_path",
    "extract_image_path_from_src",
    "format_timestamp",
    "get_extension_from_mime",
    "get_logger",
    "is_image_file",
    "remove_note_suffixes",
    "sanitize_filename",
]
