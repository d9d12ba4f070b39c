"""Output schemas for orphan commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class OrphanScanOutput(BaseOutputSchema):
    """Output schema for orphan scan command."""

    orphaned: list[dict[str, Any]] = Field(default_factory=list, description="Images with no references")
    total_count: int = Field(default=0, description="Images scanned")
    referenced_count: int = Field(default=0, description="Images referenced by at least one document")
    orphaned_bytes: int = Field(default=0, description="Total size of orphaned images")


class OrphanCleanOutput(BaseOutputSchema):
    """Output schema for orphan clean command."""

    action: str = Field(..., description="'delete' or 'move'")
    target_folder: str = Field(default="", description="Destination folder for 'move'")
    processed: int = Field(default=0, description="Images trashed or moved")
    failed: int = Field(default=0, description="Images that failed")
