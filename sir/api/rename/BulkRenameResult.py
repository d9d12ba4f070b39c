"""BulkRenameResult model (UNO: single model)."""

from dataclasses import dataclass, field


@dataclass
class BulkRenameResult:
    """Counts and per-item errors from a batch of renames."""

    success: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)
