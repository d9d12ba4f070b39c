"""Vault configuration management."""

from __future__ import annotations

__all__ = ["VaultConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VaultConfig(BaseModel):
    """Vault configuration model."""

    model_config = ConfigDict(extra="forbid")

    base_dir: str = Field(..., description="Path to vault root directory")
    attachment_folder: str = Field(
        default="",
        description="Where new images go: '' or '/' for the vault root, './' next to the note, "
        "'./sub' in a subfolder of the note's folder, otherwise a vault-relative folder",
    )

    @field_validator("base_dir")
    @classmethod
    def _normalize_base_dir(cls, v: str) -> str:
        from sir.utils.expand_path import expand_path

        return str(expand_path(v))
