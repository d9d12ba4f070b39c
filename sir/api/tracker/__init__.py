"""Per-document tracking of referenced images for link-removal detection."""

from .LinkTracker import LinkTracker
from .extract_image_targets import extract_image_targets

__all__ = ["LinkTracker", "extract_image_targets"]
