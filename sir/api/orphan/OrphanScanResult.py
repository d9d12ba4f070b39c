"""OrphanScanResult model (UNO: single model)."""

from dataclasses import dataclass, field

from .OrphanedImage import OrphanedImage


@dataclass
class OrphanScanResult:
    orphaned: list[OrphanedImage] = field(default_factory=list)
    total_count: int = 0
    referenced_count: int = 0

    @property
    def orphaned_bytes(self) -> int:
        """Combined size of all orphaned images."""
        return sum(image.size for image in self.orphaned)
