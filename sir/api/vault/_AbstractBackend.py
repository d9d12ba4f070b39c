"""Abstract base class for vault hosts."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from .VaultFile import VaultFile


class _AbstractBackend(ABC):
    """Interface the naming, rename and orphan code calls into.

    All paths are vault-relative POSIX strings.
    """

    @property
    @abstractmethod
    def vault_path(self) -> Path:
        """Root directory of the vault."""
        pass

    def refresh(self) -> None:
        """Drop any cached view of the vault contents."""
        return None

    # File primitives
    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def get_file(self, path: str) -> VaultFile | None:
        pass

    @abstractmethod
    def iter_files(self) -> Iterator[VaultFile]:
        """Iterate over all files in the vault."""
        pass

    @abstractmethod
    def iter_documents(self) -> Iterator[VaultFile]:
        """Iterate over files that can reference images (notes, canvases, drawings)."""
        pass

    @abstractmethod
    def read(self, path: str) -> str:
        pass

    @abstractmethod
    def modify(self, path: str, text: str) -> None:
        pass

    @abstractmethod
    def create_binary(self, path: str, data: bytes) -> VaultFile:
        """Create a new file; raises FileExistsError if the path is taken."""
        pass

    @abstractmethod
    def create_folder(self, path: str) -> None:
        """Create one folder; raises FileExistsError if it already exists."""
        pass

    @abstractmethod
    def rename(self, path: str, new_path: str) -> VaultFile:
        """Move a file and update every reference to it in other documents."""
        pass

    @abstractmethod
    def trash(self, path: str) -> None:
        pass

    # Link index
    @abstractmethod
    def get_embeds(self, path: str) -> list[str]:
        """Embed targets of a document, as written."""
        pass

    @abstractmethod
    def resolve_link(self, link: str, source_path: str) -> VaultFile | None:
        """Resolve a link target as seen from ``source_path``."""
        pass

    @abstractmethod
    def get_backlinks(self, path: str) -> list[str]:
        """Paths of documents that embed the file at ``path``."""
        pass
