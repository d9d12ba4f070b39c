"""BulkRenameItem model (UNO: single model)."""

from dataclasses import dataclass

from ..vault.VaultFile import VaultFile


@dataclass
class BulkRenameItem:
    """A proposed rename; ``selected`` is toggled by the user before execution."""

    file: VaultFile
    current_name: str
    new_name: str
    source_note: VaultFile | None
    selected: bool = False
    is_generic: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "path": self.file.path,
            "current_name": self.current_name,
            "new_name": self.new_name,
            "source_note": self.source_note.path if self.source_note else None,
            "selected": self.selected,
            "is_generic": self.is_generic,
        }
