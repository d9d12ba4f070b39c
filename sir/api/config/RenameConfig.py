"""Rename configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils.constants import TIMESTAMP_PRESETS


class RenameConfig(BaseModel):
    """How pasted, dropped and bulk-renamed images are named."""

    model_config = ConfigDict(extra="forbid")

    suffix_mode: Literal["sequential", "timestamp"] = Field(
        default="sequential", description="Counter suffix ('Note 1') or timestamp suffix ('Note 20250101-120000')"
    )
    timestamp_format: str = Field(
        default="YYYYMMDD-HHmmss", description="Token pattern for timestamp suffixes, or a preset name (compact, readable)"
    )
    aggressive_sanitization: bool = Field(
        default=False, description="Lowercase, strip accents and use underscores in generated names"
    )
    note_suffixes: list[str] = Field(
        default_factory=lambda: [".excalidraw"],
        description="Suffixes removed from note names before naming images",
    )
    auto_rename_on_create: bool = Field(
        default=True, description="Rename images created by other means (drag from OS, sync) after the active note"
    )
    prompt_delete_on_link_removal: bool = Field(
        default=True, description="Offer to delete an image when its last link is removed from a note"
    )

    @field_validator("timestamp_format")
    @classmethod
    def _require_timestamp_format(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("timestamp_format must not be empty")
        return TIMESTAMP_PRESETS.get(v.strip().lower(), v)
