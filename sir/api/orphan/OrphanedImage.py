"""OrphanedImage model (UNO: single model)."""

from dataclasses import dataclass

from ..vault.VaultFile import VaultFile


@dataclass
class OrphanedImage:
    """An unreferenced image; selected by default so the user opts out."""

    file: VaultFile
    size: int
    selected: bool = True

    def to_dict(self) -> dict[str, object]:
        return {"path": self.file.path, "name": self.file.name, "size": self.size, "selected": self.selected}
