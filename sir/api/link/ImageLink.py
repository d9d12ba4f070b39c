"""ImageLink model (UNO: single model)."""

from dataclasses import dataclass

from .SyntaxKind import SyntaxKind


@dataclass(frozen=True)
class ImageLink:
    """An image reference located in a document's text.

    ``text[start:end] == full_match`` always holds for the text it was parsed from.
    """

    full_match: str
    file_path: str
    caption: str | None
    size: str | None
    kind: SyntaxKind
    start: int
    end: int

    def to_dict(self) -> dict[str, object]:
        return {
            "full_match": self.full_match,
            "file_path": self.file_path,
            "caption": self.caption,
            "size": self.size,
            "kind": self.kind.value,
            "start": self.start,
            "end": self.end,
        }
