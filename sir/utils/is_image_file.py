from .constants import IMAGE_EXTENSIONS


def is_image_file(extension: str) -> bool:
    """Check whether a file extension (without dot) is a supported image type."""
    return extension.lower() in IMAGE_EXTENSIONS
