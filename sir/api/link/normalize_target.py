"""Link target normalization for lookups."""

from urllib.parse import unquote


def normalize_target(path: str) -> str:
    """Reduce a link target to a comparable key: decoded, last path segment, lowercase."""
    return unquote(path).split("/")[-1].strip().lower()
