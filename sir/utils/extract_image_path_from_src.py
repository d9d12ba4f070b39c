"""Image file name extraction from rendered image sources."""

import re
from urllib.parse import unquote

_APP_URL_PATTERN = re.compile(r"app://[^/]+/(.+?)(\?|$)")


def extract_image_path_from_src(src: str) -> str | None:
    """Get the bare file name referenced by an ``<img src=...>`` value.

    Handles percent-encoding, ``app://<id>/path`` URLs and query strings.
    """
    image_path = unquote(src)

    if "app://" in image_path:
        match = _APP_URL_PATTERN.search(image_path)
        if match:
            image_path = match.group(1)

    file_name = image_path.split("/")[-1]
    if not file_name:
        return None
    return file_name.split("?")[0]
