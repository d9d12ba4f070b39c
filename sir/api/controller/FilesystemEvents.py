"""Filesystem events dataclass for vault watching."""

from dataclasses import dataclass, field


@dataclass
class FilesystemEvents:
    """Filesystem events accumulated between two polls.

    All paths are absolute paths as strings.
    """

    modified: list[str] = field(default_factory=list)
    created: list[str] = field(default_factory=list)
    moved: list[tuple[str, str]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.modified or self.created or self.moved)
