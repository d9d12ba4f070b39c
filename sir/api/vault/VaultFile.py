"""VaultFile model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VaultFile:
    """A file in the vault, identified by its vault-relative POSIX path."""

    path: str
    size: int = 0

    @property
    def name(self) -> str:
        """File name with extension."""
        return self.path.rsplit("/", 1)[-1]

    @property
    def basename(self) -> str:
        """File name without extension."""
        stem, dot, _ = self.name.rpartition(".")
        return stem if dot and stem else self.name

    @property
    def extension(self) -> str:
        """Extension without dot, or "" when the name has none."""
        stem, dot, ext = self.name.rpartition(".")
        return ext if dot and stem else ""

    @property
    def parent(self) -> str:
        """Vault-relative folder ("" for the vault root)."""
        return self.path.rpartition("/")[0]

    def to_dict(self) -> dict[str, object]:
        return {"path": self.path, "name": self.name, "size": self.size}
