from ._constants import GENERIC_NAME_PATTERNS


def is_generic_name(basename: str) -> bool:
    """Check whether an image base name looks auto-generated ("Pasted image ...", "IMG_001", ...)."""
    return any(pattern.search(basename) for pattern in GENERIC_NAME_PATTERNS)
