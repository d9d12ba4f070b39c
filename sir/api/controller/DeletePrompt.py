"""DeletePrompt model (UNO: single model)."""

from dataclasses import dataclass, field


@dataclass
class DeletePrompt:
    """A removed image link offered for deletion, and what became of the offer.

    ``backlinks`` lists other documents that still embed the image.
    """

    image_path: str
    document: str
    backlinks: list[str] = field(default_factory=list)
    confirmed: bool = False
    trashed: bool = False
    error: str | None = None

    @property
    def is_orphan(self) -> bool:
        """True when no other document embeds the image."""
        return not self.backlinks

    def to_dict(self) -> dict[str, object]:
        return {
            "image_path": self.image_path,
            "document": self.document,
            "backlinks": list(self.backlinks),
            "is_orphan": self.is_orphan,
            "confirmed": self.confirmed,
            "trashed": self.trashed,
            "error": self.error,
        }
