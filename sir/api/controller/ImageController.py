"""Image controller: reacts to editor and vault events for the active note."""

import logging
import time
from collections.abc import Callable
from datetime import datetime
from urllib.parse import unquote

from ...utils.extract_image_path_from_src import extract_image_path_from_src as _extract_image_path_from_src
from ...utils.get_extension_from_mime import get_extension_from_mime
from ...utils.is_image_file import is_image_file
from ...utils.remove_note_suffixes import remove_note_suffixes
from ...utils.sanitize_filename import sanitize_filename
from ..config.RenameConfig import RenameConfig
from ..config.SirConfig import SirConfig
from ..config.TrackerConfig import TrackerConfig
from ..link.ImageLink import ImageLink
from ..link.SyntaxKind import SyntaxKind
from ..link.build_image_link import build_image_link
from ..link.get_first_image_link_in_line import get_first_image_link_in_line as _first_link_in_line
from ..link.get_image_link_at_cursor import get_image_link_at_cursor as _link_at_cursor
from ..link.remove_caption import remove_caption as _remove_caption
from ..link.set_caption import set_caption as _set_caption
from ..naming.resolve_available_path import resolve_available_path
from ..rename.ImageNotFoundError import ImageNotFoundError
from ..rename.InvalidFilenameError import InvalidFilenameError
from ..rename.rename_image import rename_image as _rename_image
from ..tracker.LinkTracker import LinkTracker
from ..vault._AbstractBackend import _AbstractBackend
from ..vault.ensure_folder_exists import ensure_folder_exists
from ..vault.get_attachment_folder import get_attachment_folder
from .Debouncer import Debouncer
from .DeletePrompt import DeletePrompt
from .ProcessedImage import ProcessedImage
from .TtlSet import TtlSet

logger = logging.getLogger(__name__)


def _link_path(link: ImageLink | None) -> str | None:
    if link is None:
        return None
    return unquote(link.file_path) if link.kind is SyntaxKind.INLINE else link.file_path


class ImageController:
    """Owns the per-session state for one vault.

    That state is the link tracker, the guard for images this controller
    just wrote, the one-shot force-rename flag and the editor-change debouncer.
    Nothing here is global; two controllers never share state.
    """

    def __init__(
        self,
        backend: _AbstractBackend,
        rename_config: RenameConfig | None = None,
        tracker_config: TrackerConfig | None = None,
        *,
        attachment_folder: str = "",
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now,
        confirm_delete: Callable[[DeletePrompt], bool] | None = None,
    ):
        """Initialize the controller.

        Args:
            backend: Vault host to read and write through
            rename_config: Naming settings (defaults when None)
            tracker_config: Debounce and guard timings (defaults when None)
            attachment_folder: Attachment folder setting, see get_attachment_folder
            clock: Monotonic clock in seconds for the debouncer and guards
            now: Wall clock used for timestamp suffixes
            confirm_delete: Asked whether to trash an image whose link was removed;
                when None nothing is ever trashed
        """
        self.backend = backend
        self.rename_config = rename_config or RenameConfig()
        self.tracker_config = tracker_config or TrackerConfig()
        self.attachment_folder = attachment_folder
        self.confirm_delete = confirm_delete
        self._clock = clock
        self._now = now

        ttl = self.tracker_config.processing_ttl_ms / 1000
        self.tracker = LinkTracker()
        self._processing = TtlSet(ttl, clock)
        self._debouncer = Debouncer(self.tracker_config.debounce_ms / 1000, clock)
        self._force_rename_until: float | None = None
        self._open_documents: set[str] = set()
        self.active_document: str | None = None

    @classmethod
    def from_config(cls, config: SirConfig, backend: _AbstractBackend, **kwargs) -> "ImageController":
        return cls(
            backend,
            config.rename,
            config.tracker,
            attachment_folder=config.vault.attachment_folder,
            **kwargs,
        )

    # Documents
    def open_document(self, path: str, activate: bool = True) -> None:
        """Start tracking a document; by default it also becomes the active one."""
        self.tracker.snapshot(path, self.backend.read(path))
        self._open_documents.add(path)
        if activate:
            self.active_document = path

    def close_document(self, path: str) -> None:
        self.tracker.clear(path)
        self._debouncer.cancel(path)
        self._open_documents.discard(path)
        if self.active_document == path:
            self.active_document = None

    def is_processing(self, path: str) -> bool:
        """Whether ``path`` was just written by this controller and is shielded from auto-rename."""
        return path in self._processing

    def _rebaseline(self, path: str, text: str) -> None:
        # A queued check holds editor text from before this write
        self._debouncer.cancel(path)
        self.tracker.snapshot(path, text)

    def _refresh_snapshots(self) -> None:
        for path in list(self._open_documents):
            if self.backend.exists(path):
                self._rebaseline(path, self.backend.read(path))

    def _note_base_name(self, document: str) -> str:
        note = self.backend.get_file(document)
        if note is None:
            raise FileNotFoundError(f"Note not found: {document}")
        return sanitize_filename(
            remove_note_suffixes(note.basename, self.rename_config.note_suffixes),
            self.rename_config.aggressive_sanitization,
        )

    def _available_path(self, folder: str, base_name: str, extension: str) -> str:
        return resolve_available_path(
            folder,
            base_name,
            extension,
            self.rename_config.suffix_mode,
            self.backend.exists,
            lambda f: ensure_folder_exists(self.backend, f),
            timestamp_format=self.rename_config.timestamp_format,
            now=self._now(),
        )

    # Paste and drop
    def _save_image(self, document: str, data: bytes, mime_type: str) -> ProcessedImage:
        base_name = self._note_base_name(document)
        if not base_name:
            raise InvalidFilenameError(f"Note name gives an empty file name: {document}")

        folder = get_attachment_folder(document, self.attachment_folder)
        path = self._available_path(folder, base_name, get_extension_from_mime(mime_type))
        self._processing.add(path)
        self.backend.create_binary(path, data)

        file_name = path.rsplit("/", 1)[-1]
        logger.info(f"Image saved as {path}")
        return ProcessedImage(path=path, file_name=file_name, markdown_link=build_image_link(file_name))

    def _insert(self, document: str, insertion: str, offset: int | None) -> None:
        text = self.backend.read(document)
        position = len(text) if offset is None else max(0, min(offset, len(text)))
        updated = text[:position] + insertion + text[position:]
        self.backend.modify(document, updated)
        self._rebaseline(document, updated)

    def paste_image(self, document: str, data: bytes, mime_type: str, offset: int | None = None) -> ProcessedImage | None:
        """Save pasted image data named after ``document`` and link it at ``offset``.

        Args:
            document: Vault-relative path of the note being edited
            data: Image bytes
            mime_type: MIME type of the payload; anything but ``image/*`` is ignored
            offset: Character offset for the link, end of the note when None

        Returns:
            The saved image, or None for non-image payloads

        Raises:
            InvalidFilenameError: The note's name sanitizes to nothing
        """
        if not mime_type.startswith("image/"):
            return None
        processed = self._save_image(document, data, mime_type)
        self._insert(document, processed.markdown_link, offset)
        return processed

    def drop_images(
        self, document: str, items: list[tuple[bytes, str]], offset: int | None = None
    ) -> list[ProcessedImage]:
        """Save every image among dropped ``(data, mime_type)`` items and link them, one per line."""
        processed = [
            self._save_image(document, data, mime_type) for data, mime_type in items if mime_type.startswith("image/")
        ]
        if processed:
            self._insert(document, "\n".join(image.markdown_link for image in processed), offset)
        return processed

    # File creation
    def arm_force_rename(self) -> None:
        """Rename the next created image even with auto-rename off; lapses after the guard TTL."""
        self._force_rename_until = self._clock() + self.tracker_config.processing_ttl_ms / 1000

    def _take_force_rename(self) -> bool:
        armed = self._force_rename_until is not None and self._clock() < self._force_rename_until
        self._force_rename_until = None
        return armed

    def handle_file_created(self, path: str) -> str | None:
        """Rename an image that appeared in the vault after the active note.

        Images this controller wrote itself are skipped, as is everything when
        no note is active.

        Returns:
            The new vault-relative path, or None when nothing was renamed
        """
        if self.active_document is None or path in self._processing:
            return None
        file = self.backend.get_file(path)
        if file is None or not is_image_file(file.extension):
            return None
        if not (self._take_force_rename() or self.rename_config.auto_rename_on_create):
            return None

        base_name = self._note_base_name(self.active_document)
        if not base_name:
            logger.warning(f"Not renaming {path}: {self.active_document} gives an empty file name")
            return None
        new_path = self._available_path(file.parent, base_name, file.extension)
        self._processing.add(new_path)
        try:
            self.backend.rename(path, new_path)
        except OSError as exc:
            logger.warning(f"Failed to rename {path} to {new_path}: {exc}")
            return None

        logger.info(f"Auto-renamed {path} -> {new_path}")
        self._refresh_snapshots()
        return new_path

    # Link removal
    def handle_editor_change(self, path: str, text: str) -> None:
        """Queue a link-removal check of ``text``; repeated edits push the check back."""
        self._debouncer.call(path, lambda: self._check_removed_links(path, text))

    def poll(self) -> list[DeletePrompt]:
        """Run the link-removal checks whose quiet period has passed."""
        return [prompt for prompts in self._debouncer.poll() for prompt in prompts]

    def flush(self) -> list[DeletePrompt]:
        """Run all queued link-removal checks now."""
        return [prompt for prompts in self._debouncer.flush() for prompt in prompts]

    def _check_removed_links(self, path: str, text: str) -> list[DeletePrompt]:
        removed = self.tracker.diff_and_update(path, text)
        if not removed or not self.rename_config.prompt_delete_on_link_removal:
            return []

        prompts = []
        for target in removed:
            image = self.backend.resolve_link(target, path)
            if image is None or not is_image_file(image.extension):
                continue
            prompt = DeletePrompt(
                image_path=image.path,
                document=path,
                backlinks=[doc for doc in self.backend.get_backlinks(image.path) if doc != path],
            )
            prompt.confirmed = bool(self.confirm_delete(prompt)) if self.confirm_delete else False
            if prompt.confirmed:
                try:
                    self.backend.trash(image.path)
                    prompt.trashed = True
                    logger.info(f"Trashed {image.path} after its link was removed from {path}")
                except OSError as exc:
                    logger.error(f"Failed to trash {image.path}: {exc}")
                    prompt.error = str(exc)
            prompts.append(prompt)
        return prompts

    # Context actions
    def rename_image(self, path: str, new_name: str) -> str:
        """Rename an image in place and return its new file name.

        Raises:
            InvalidFilenameError: ``new_name`` is empty once sanitized
        """
        file_name = _rename_image(self.backend, path, new_name, self.rename_config.aggressive_sanitization)
        self._refresh_snapshots()
        return file_name

    def rename_image_from_link(self, link: str, source_path: str, new_name: str) -> str:
        """Rename the image a link in ``source_path`` points at.

        Raises:
            ImageNotFoundError: The link does not resolve to an image
        """
        image = self.backend.resolve_link(link, source_path)
        if image is None or not is_image_file(image.extension):
            raise ImageNotFoundError(link)
        return self.rename_image(image.path, new_name)

    def _rewrite(self, document: str, rewrite: Callable[[str], str]) -> bool:
        text = self.backend.read(document)
        updated = rewrite(text)
        if updated == text:
            return False
        self.backend.modify(document, updated)
        self._rebaseline(document, updated)
        return True

    def set_caption(self, document: str, target: str, caption: str | None) -> bool:
        """Set the caption of the link to ``target`` in ``document``; returns whether the note changed."""
        return self._rewrite(document, lambda text: _set_caption(text, target, caption))

    def remove_caption(self, document: str, target: str) -> bool:
        return self._rewrite(document, lambda text: _remove_caption(text, target))

    @staticmethod
    def get_image_link_at_cursor(line: str, pos: int) -> str | None:
        """Path of the image link under column ``pos`` of ``line``."""
        return _link_path(_link_at_cursor(line, pos))

    @staticmethod
    def get_first_image_link_in_line(line: str) -> str | None:
        return _link_path(_first_link_in_line(line))

    @staticmethod
    def extract_image_path_from_src(src: str) -> str | None:
        """File name behind a rendered image's ``src``."""
        return _extract_image_path_from_src(src)
