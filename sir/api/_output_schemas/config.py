"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    section: str = Field(..., description="Section name, empty string when listing all sections")
    content: dict[str, Any] = Field(
        default_factory=dict,
        description="Section names under 'sections' when listing, otherwise the section's settings",
    )
    config_path: str = Field(..., description="Path to the configuration file")
