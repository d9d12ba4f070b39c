"""OrphanActionResult model (UNO: single model)."""

from dataclasses import dataclass, field


@dataclass
class OrphanActionResult:
    """Counts and per-image errors from deleting or moving orphans."""

    success: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)
