"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class LinkShowOutput(BaseOutputSchema):
    """Output schema for link show command."""

    note: str = Field(..., description="Vault-relative path of the note")
    links: list[dict[str, Any]] = Field(default_factory=list, description="Image links in order of appearance")
    count: int = Field(default=0, description="Number of image links")


class LinkCaptionOutput(BaseOutputSchema):
    """Output schema for link caption command."""

    note: str = Field(..., description="Vault-relative path of the note")
    image: str = Field(..., description="Image target the caption applies to")
    caption: str | None = Field(default=None, description="New caption, None when removed")
    changed: bool = Field(default=False, description="Whether the note text changed")
    link: str | None = Field(default=None, description="The link as it now reads in the note")
