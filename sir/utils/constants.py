"""Shared constants for image naming and link recognition."""

IMAGE_EXTENSIONS: tuple[str, ...] = (
    "png",
    "jpg",
    "jpeg",
    "gif",
    "webp",
    "bmp",
    "svg",
    "avif",
    "tiff",
    "tif",
    "ico",
)

MIME_TO_EXTENSION: dict[str, str] = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/bmp": "bmp",
    "image/svg+xml": "svg",
    "image/avif": "avif",
    "image/tiff": "tiff",
    "image/x-icon": "ico",
    "image/vnd.microsoft.icon": "ico",
}

DEFAULT_EXTENSION = "png"

# Named timestamp formats; any other value is a custom token pattern
TIMESTAMP_PRESETS: dict[str, str] = {
    "compact": "YYYYMMDD-HHmmss",  # 20251130-185432
    "readable": "YYYY-MM-DD_HH-mm-ss",  # 2025-11-30_18-54-32
}

SIR_HOME_EXT = ".sir"
