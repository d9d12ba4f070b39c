from .constants import DEFAULT_EXTENSION, MIME_TO_EXTENSION


def get_extension_from_mime(mime_type: str) -> str:
    """Map an image MIME type to a file extension, defaulting to png."""
    return MIME_TO_EXTENSION.get(mime_type, DEFAULT_EXTENSION)
