"""Output schemas for rename commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class RenamePreviewOutput(BaseOutputSchema):
    """Output schema for rename preview command."""

    scope: str = Field(..., description="'note' or 'vault'")
    mode: str = Field(..., description="'replace', 'prepend' or 'pattern'")
    items: list[dict[str, Any]] = Field(default_factory=list, description="Proposed renames")
    scanned: int = Field(default=0, description="Images scanned before filtering")


class RenameRunOutput(BaseOutputSchema):
    """Output schema for rename run command."""

    items: list[dict[str, Any]] = Field(default_factory=list, description="Proposed renames with their selection")
    renamed: int = Field(default=0, description="Images renamed")
    failed: int = Field(default=0, description="Images that failed to rename")


class RenameImageOutput(BaseOutputSchema):
    """Output schema for rename image command."""

    path: str = Field(..., description="Original vault-relative path")
    new_name: str = Field(default="", description="New file name with extension, empty on failure")
