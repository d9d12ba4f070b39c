"""Directory-backed vault host."""

import logging
import os
import shutil
from collections.abc import Iterator
from pathlib import Path

from .._AbstractBackend import _AbstractBackend
from ..VaultFile import VaultFile
from ._constants import DOCUMENT_EXTENSIONS, DRAWING_MARKER, SKIP_DIRS, TRASH_DIR
from ._extract_embeds import _extract_embeds
from ._LinkResolver import _LinkResolver
from ._rewrite_references import _rewrite_references

logger = logging.getLogger(__name__)


class _Backend(_AbstractBackend):
    """Vault host over a plain directory tree (an Obsidian vault folder, for instance)."""

    def __init__(self, vault_path: Path):
        self._vault_path = vault_path
        self._files: list[VaultFile] | None = None
        self._resolver = _LinkResolver(self.get_file, self._all_files)

    @property
    def vault_path(self) -> Path:
        return self._vault_path

    def refresh(self) -> None:
        """Forget the cached file list after changes made outside this backend."""
        self._files = None

    def _all_files(self) -> list[VaultFile]:
        if self._files is None:
            self._files = list(self.iter_files())
        return self._files

    def _abs(self, path: str) -> Path:
        parts = [part for part in path.strip("/").split("/") if part not in ("", ".")]
        if ".." in parts:
            raise ValueError(f"Path escapes the vault: {path}")
        return self._vault_path.joinpath(*parts)

    def _to_file(self, abs_path: Path) -> VaultFile:
        rel = abs_path.relative_to(self._vault_path).as_posix()
        return VaultFile(path=rel, size=abs_path.stat().st_size)

    # File primitives
    def exists(self, path: str) -> bool:
        return self._abs(path).exists()

    def get_file(self, path: str) -> VaultFile | None:
        try:
            abs_path = self._abs(path)
        except ValueError:
            return None
        if not path.strip("/") or not abs_path.is_file():
            return None
        return self._to_file(abs_path)

    def iter_files(self) -> Iterator[VaultFile]:
        for root, dirs, files in os.walk(self._vault_path):
            dirs[:] = sorted(d for d in dirs if d not in SKIP_DIRS)
            for name in sorted(files):
                yield self._to_file(Path(root) / name)

    def iter_documents(self) -> Iterator[VaultFile]:
        for file in self.iter_files():
            if file.extension.lower() in DOCUMENT_EXTENSIONS or DRAWING_MARKER in file.name.lower():
                yield file

    def read(self, path: str) -> str:
        return self._abs(path).read_text(encoding="utf-8")

    def modify(self, path: str, text: str) -> None:
        abs_path = self._abs(path)
        if not abs_path.is_file():
            raise FileNotFoundError(f"No such file in vault: {path}")
        abs_path.write_text(text, encoding="utf-8")

    def create_binary(self, path: str, data: bytes) -> VaultFile:
        abs_path = self._abs(path)
        with abs_path.open("xb") as fh:
            fh.write(data)
        self._files = None
        return self._to_file(abs_path)

    def create_folder(self, path: str) -> None:
        self._abs(path).mkdir()

    def rename(self, path: str, new_path: str) -> VaultFile:
        """Move a file, then retarget links to it in every note and canvas.

        Raises:
            FileNotFoundError: ``path`` is not a file
            FileExistsError: something already exists at ``new_path``
        """
        source = self._abs(path)
        destination = self._abs(new_path)
        if not source.is_file():
            raise FileNotFoundError(f"No such file in vault: {path}")
        if destination.exists():
            raise FileExistsError(f"Destination already exists: {new_path}")

        # Links must be resolved while the file is still at its old path
        new_file = VaultFile(path=destination.relative_to(self._vault_path).as_posix(), size=source.stat().st_size)
        updates: list[tuple[str, str]] = []
        for document in self.iter_documents():
            if document.path == path:
                continue
            text = self.read(document.path)

            def points_at_old(target: str, source_path: str = document.path) -> bool:
                resolved = self.resolve_link(target, source_path)
                return resolved is not None and resolved.path == path

            updated = _rewrite_references(document, text, points_at_old, new_file)
            if updated != text:
                updates.append((document.path, updated))

        destination.parent.mkdir(parents=True, exist_ok=True)
        source.rename(destination)
        self._files = None

        for document_path, updated in updates:
            self.modify(document_path, updated)
        if updates:
            logger.info(f"Renamed {path} -> {new_file.path}, updated {len(updates)} document(s)")
        return new_file

    def trash(self, path: str) -> None:
        """Move a file into the vault's ``.trash`` folder, numbering it if the name is taken."""
        source = self._abs(path)
        if not source.is_file():
            raise FileNotFoundError(f"No such file in vault: {path}")
        trash_dir = self._vault_path / TRASH_DIR
        trash_dir.mkdir(exist_ok=True)

        destination = trash_dir / source.name
        counter = 1
        while destination.exists():
            destination = trash_dir / f"{source.stem} {counter}{source.suffix}"
            counter += 1
        shutil.move(str(source), str(destination))
        self._files = None

    # Link index
    def get_embeds(self, path: str) -> list[str]:
        document = self.get_file(path)
        if document is None:
            raise FileNotFoundError(f"No such file in vault: {path}")
        return _extract_embeds(document, self.read(path))

    def resolve_link(self, link: str, source_path: str) -> VaultFile | None:
        return self._resolver.resolve(link, source_path)

    def get_backlinks(self, path: str) -> list[str]:
        backlinks = []
        for document in self.iter_documents():
            if document.path == path:
                continue
            for target in self.get_embeds(document.path):
                resolved = self.resolve_link(target, document.path)
                if resolved is not None and resolved.path == path:
                    backlinks.append(document.path)
                    break
        return backlinks
