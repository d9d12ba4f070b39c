"""Link tracker: snapshots of referenced images per open document."""

import logging

from .extract_image_targets import extract_image_targets

logger = logging.getLogger(__name__)


class LinkTracker:
    """Remembers which images each document references and reports removals.

    State is per instance and keyed by document path; documents never
    affect each other's snapshots.
    """

    def __init__(self) -> None:
        self._cache: dict[str, set[str]] = {}

    def snapshot(self, path: str, text: str) -> None:
        """Record the current image references of a document as its baseline."""
        self._cache[path] = extract_image_targets(text)

    def diff_and_update(self, path: str, text: str) -> list[str]:
        """Return the images referenced before but not in ``text``, then store ``text``'s set.

        A document without a previous snapshot yields no removals.
        """
        new_targets = extract_image_targets(text)
        old_targets = self._cache.get(path)
        self._cache[path] = new_targets
        if old_targets is None:
            return []

        removed = sorted(old_targets - new_targets)
        if removed:
            logger.debug(f"Links removed from {path}: {removed}")
        return removed

    def clear(self, path: str) -> None:
        self._cache.pop(path, None)

    def get_cached(self, path: str) -> set[str] | None:
        """Return a copy of the stored snapshot, or None if the document is not tracked."""
        cached = self._cache.get(path)
        return set(cached) if cached is not None else None

    def rename_document(self, old_path: str, new_path: str) -> None:
        """Carry a snapshot over when its document is renamed."""
        if old_path in self._cache:
            self._cache[new_path] = self._cache.pop(old_path)
