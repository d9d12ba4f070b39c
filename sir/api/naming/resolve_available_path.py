"""Available path resolution (UNO: single function)."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Literal

from ...utils.format_timestamp import format_timestamp

logger = logging.getLogger(__name__)

SuffixMode = Literal["sequential", "timestamp"]

# Probe count between "still searching" warnings
_PROBE_WARNING_INTERVAL = 1000


def _join(folder: str, file_name: str) -> str:
    folder = folder.strip("/")
    return f"{folder}/{file_name}" if folder else file_name


def resolve_available_path(
    folder: str,
    base_name: str,
    extension: str,
    suffix_mode: SuffixMode,
    exists: Callable[[str], bool],
    ensure_folder: Callable[[str], None] | None = None,
    *,
    timestamp_format: str = "YYYYMMDD-HHmmss",
    now: datetime | None = None,
) -> str:
    """Find a vault path for a new image that no file occupies yet.

    Sequential mode yields ``"{base} 1.{ext}"``, ``"{base} 2.{ext}"``, ... and
    returns the first free one. Timestamp mode yields ``"{base} {timestamp}.{ext}"``
    and, if that is taken, ``"{base} {timestamp}-1.{ext}"``, ``-2``, ...

    Args:
        folder: Vault-relative folder ("" for the vault root)
        base_name: Sanitized name the file is named after
        extension: Extension without dot
        suffix_mode: "sequential" or "timestamp"
        exists: Existence check for a vault-relative path
        ensure_folder: Called with ``folder`` before probing when a folder is given
        timestamp_format: Token pattern used in timestamp mode
        now: Time used in timestamp mode (defaults to the current time)

    Returns:
        Vault-relative path that ``exists`` reported as free
    """
    if folder.strip("/") and ensure_folder is not None:
        ensure_folder(folder.strip("/"))

    if suffix_mode == "timestamp":
        stem = f"{base_name} {format_timestamp(timestamp_format, now)}"
        candidate = _join(folder, f"{stem}.{extension}")
        if not exists(candidate):
            return candidate
        stem = f"{stem}-"
    elif suffix_mode == "sequential":
        stem = f"{base_name} "
    else:
        raise ValueError(f"Unknown suffix mode: {suffix_mode!r}")

    counter = 1
    while True:
        candidate = _join(folder, f"{stem}{counter}.{extension}")
        if not exists(candidate):
            return candidate
        if counter % _PROBE_WARNING_INTERVAL == 0:
            logger.warning(f"Still searching for a free name for {base_name!r} in {folder!r} after {counter} probes")
        counter += 1
