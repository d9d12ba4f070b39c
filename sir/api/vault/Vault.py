"""Vault public API."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..config.VaultConfig import VaultConfig
from ._AbstractBackend import _AbstractBackend
from .VaultFile import VaultFile


class Vault(_AbstractBackend):
    """Facade for vault operations.

    Delegates to the directory-backed host rooted at ``vault_config.base_dir``.
    Acts as a context manager; the host is only available inside ``with``.
    """

    def __init__(self, vault_config: VaultConfig):
        self.vault_config = vault_config
        self._backend: _AbstractBackend | None = None

    def __enter__(self) -> "Vault":
        from ._filesystem._Backend import _Backend

        vault_path = Path(self.vault_config.base_dir)
        if not vault_path.is_dir():
            raise ValueError(f"Vault directory does not exist: {vault_path}")
        self._backend = _Backend(vault_path)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self._backend = None

    @property
    def backend(self) -> _AbstractBackend:
        if self._backend is None:
            raise RuntimeError("Vault not initialized (use 'with Vault(...)')")
        return self._backend

    @property
    def vault_path(self) -> Path:
        """Root directory of the vault."""
        return self.backend.vault_path

    def refresh(self) -> None:
        self.backend.refresh()

    def exists(self, path: str) -> bool:
        return self.backend.exists(path)

    def get_file(self, path: str) -> VaultFile | None:
        return self.backend.get_file(path)

    def iter_files(self) -> Iterator[VaultFile]:
        return self.backend.iter_files()

    def iter_documents(self) -> Iterator[VaultFile]:
        return self.backend.iter_documents()

    def read(self, path: str) -> str:
        return self.backend.read(path)

    def modify(self, path: str, text: str) -> None:
        self.backend.modify(path, text)

    def create_binary(self, path: str, data: bytes) -> VaultFile:
        return self.backend.create_binary(path, data)

    def create_folder(self, path: str) -> None:
        self.backend.create_folder(path)

    def rename(self, path: str, new_path: str) -> VaultFile:
        return self.backend.rename(path, new_path)

    def trash(self, path: str) -> None:
        self.backend.trash(path)

    def get_embeds(self, path: str) -> list[str]:
        return self.backend.get_embeds(path)

    def resolve_link(self, link: str, source_path: str) -> VaultFile | None:
        return self.backend.resolve_link(link, source_path)

    def get_backlinks(self, path: str) -> list[str]:
        return self.backend.get_backlinks(path)
