"""Link target resolution following wiki-link lookup rules."""

from __future__ import annotations

__all__ = ["_LinkResolver"]

import posixpath
from collections.abc import Callable
from urllib.parse import unquote

from ..VaultFile import VaultFile
from ._is_external import _is_external


class _LinkResolver:
    """Resolves link targets written in a document to vault files."""

    def __init__(
        self,
        get_file: Callable[[str], VaultFile | None],
        list_files: Callable[[], list[VaultFile]],
    ):
        """Initialize the resolver.

        Args:
            get_file: Looks up a file by exact vault-relative path
            list_files: Returns every file in the vault (used for name lookup)
        """
        self._get_file = get_file
        self._list_files = list_files
        self.strategies: list[Callable[[str, str], VaultFile | None]] = [
            self._resolve_vault_path,
            self._resolve_relative_path,
            self._resolve_by_name,
        ]

    def resolve(self, link: str, source_path: str) -> VaultFile | None:
        """Resolve ``link`` as written in the document at ``source_path``.

        The ``#subpath`` is ignored and percent-escapes are decoded. External
        URLs resolve to nothing.
        """
        target = unquote(link.split("#", 1)[0]).strip()
        if not target or _is_external(target):
            return None
        for strategy in self.strategies:
            found = strategy(target, source_path)
            if found is not None:
                return found
        return None

    def _resolve_vault_path(self, target: str, source_path: str) -> VaultFile | None:
        return self._get_file(target.lstrip("/"))

    def _resolve_relative_path(self, target: str, source_path: str) -> VaultFile | None:
        source_parent = source_path.rpartition("/")[0]
        if not source_parent and not target.startswith("."):
            return None
        joined = posixpath.normpath(posixpath.join(source_parent, target))
        if joined.startswith(".."):
            return None
        return self._get_file(joined)

    def _resolve_by_name(self, target: str, source_path: str) -> VaultFile | None:
        folder_hint, _, name = target.lower().rpartition("/")
        files = self._list_files()

        candidates = [f for f in files if f.name.lower() == name]
        by_basename = not candidates
        if by_basename:
            candidates = [f for f in files if f.basename.lower() == name]
        if folder_hint:
            candidates = [f for f in candidates if f"/{f.parent.lower()}".endswith(f"/{folder_hint}")]
        if not candidates:
            return None

        source_parent = source_path.rpartition("/")[0]
        return min(
            candidates,
            key=lambda f: (
                by_basename and f.extension.lower() != "md",
                f.parent != source_parent,
                len(f.path),
                f.path,
            ),
        )
