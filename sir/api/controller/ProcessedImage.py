"""ProcessedImage model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessedImage:
    """An image written to the vault by a paste or drop."""

    path: str
    file_name: str
    markdown_link: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "file_name": self.file_name, "markdown_link": self.markdown_link}
