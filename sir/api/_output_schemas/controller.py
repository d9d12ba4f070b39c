"""Output schemas for paste and watch commands."""

from pydantic import Field

from ._base import BaseOutputSchema


class PasteOutput(BaseOutputSchema):
    """Output schema for paste command."""

    note: str = Field(..., description="Note the image was pasted into")
    path: str = Field(default="", description="Vault-relative path of the saved image")
    file_name: str = Field(default="", description="File name of the saved image")
    markdown_link: str = Field(default="", description="Link inserted into the note")


class WatchOutput(BaseOutputSchema):
    """Output schema for watch command."""

    vault: str = Field(..., description="Watched vault directory")
    renamed: list[str] = Field(default_factory=list, description="Images auto-renamed while watching")
    trashed: list[str] = Field(default_factory=list, description="Images trashed after their last link was removed")
