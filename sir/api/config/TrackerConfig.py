"""Link tracker timing configuration."""

from pydantic import BaseModel, ConfigDict, Field


class TrackerConfig(BaseModel):
    """Timing for the link-removal diff and the in-flight processing guard."""

    model_config = ConfigDict(extra="forbid")

    debounce_ms: int = Field(default=300, gt=0, description="Quiet period before diffing an edited note")
    processing_ttl_ms: int = Field(
        default=1000, gt=0, description="How long a freshly written image is shielded from auto-rename"
    )
