"""Bulk rename planning."""

import logging
import re
from collections.abc import Iterable

from ...utils.remove_note_suffixes import remove_note_suffixes
from ...utils.sanitize_filename import sanitize_filename
from ..vault.VaultFile import VaultFile
from ._constants import DEFAULT_PATTERN, BulkRenameMode, ImageFilter
from .BulkRenameItem import BulkRenameItem
from .ImageInfo import ImageInfo

logger = logging.getLogger(__name__)


class BulkRenamePlanner:
    """Computes rename proposals for a set of scanned images.

    Three modes are supported:

    - ``replace``: ``"{note} 1"``, ``"{note} 2"``, ... Images already named
      ``"{note} <digits>"`` are left out and do not use up a counter.
    - ``prepend``: ``"{note} - {original}"``, with ``" 2"``, ``" 3"`` for repeats.
    - ``pattern``: a template with ``{note}``, ``{original}`` and ``{n}``. ``{n}``
      counts per rendered template; without ``{n}`` repeats get a trailing counter.

    Items are never proposed when the new name equals the current one, and
    are never pre-selected.
    """

    def __init__(self, aggressive: bool = False, note_suffixes: Iterable[str] = ()):
        self.aggressive = aggressive
        self.note_suffixes = list(note_suffixes)

    def note_base_name(self, note: VaultFile) -> str:
        """Sanitized name images in ``note`` are named after."""
        return sanitize_filename(remove_note_suffixes(note.basename, self.note_suffixes), self.aggressive)

    @staticmethod
    def filter_images(images: list[ImageInfo], image_filter: ImageFilter) -> list[ImageInfo]:
        if image_filter == "all":
            return list(images)
        return [image for image in images if image.is_generic]

    def _render(self, image: ImageInfo, mode: BulkRenameMode, pattern: str | None) -> str:
        note = image.source_note
        note_name = remove_note_suffixes(note.basename, self.note_suffixes) if note else "Untitled"
        current = image.file.basename
        if mode == "prepend":
            return f"{note_name} - {current}"
        if mode == "pattern":
            return (pattern or DEFAULT_PATTERN).replace("{note}", note_name).replace("{original}", current)
        return note_name

    def generate_new_name(self, image: ImageInfo, mode: BulkRenameMode, pattern: str | None = None) -> str:
        """Sanitized name for ``image`` before duplicate counters are applied.

        A ``{n}`` in the pattern is left in place.
        """
        rendered = self._render(image, mode, pattern)
        if "{n}" not in rendered:
            return sanitize_filename(rendered, self.aggressive)
        return "{n}".join(sanitize_filename(part, self.aggressive) for part in rendered.split("{n}"))

    def plan(
        self,
        images: list[ImageInfo],
        mode: BulkRenameMode,
        image_filter: ImageFilter = "all",
        pattern: str | None = None,
    ) -> list[BulkRenameItem]:
        """Build the rename preview for ``images``.

        Args:
            images: Scan results
            mode: "replace", "prepend" or "pattern"
            image_filter: "all", or "generic" to keep only generic names
            pattern: Template for "pattern" mode

        Returns:
            Proposed renames, all with ``selected=False``
        """
        if mode not in ("replace", "prepend", "pattern"):
            raise ValueError(f"Unknown rename mode: {mode!r}")

        items: list[BulkRenameItem] = []
        used_names: dict[str, int] = {}
        numbered = mode == "pattern" and "{n}" in (pattern or "")

        for image in self.filter_images(images, image_filter):
            if image.source_note is None:
                continue

            if mode == "replace":
                note_name = self.note_base_name(image.source_note)
                if re.fullmatch(re.escape(note_name) + r" \d+", image.file.basename):
                    continue

            if numbered:
                rendered = self._render(image, mode, pattern)
                count = used_names.get(rendered, 0) + 1
                used_names[rendered] = count
                new_name = sanitize_filename(rendered.replace("{n}", str(count)), self.aggressive)
            else:
                new_name = self.generate_new_name(image, mode, pattern)
                if not new_name:
                    logger.debug(f"No usable name for {image.file.path} from {image.source_note.path}")
                    continue
                key = new_name.lower()
                count = used_names.get(key, 0) + 1
                used_names[key] = count
                if count > 1 or mode == "replace":
                    new_name = f"{new_name} {count}"

            if not new_name or new_name == image.file.basename:
                continue

            items.append(
                BulkRenameItem(
                    file=image.file,
                    current_name=image.file.basename,
                    new_name=new_name,
                    source_note=image.source_note,
                    selected=False,
                    is_generic=image.is_generic,
                )
            )
        return items
