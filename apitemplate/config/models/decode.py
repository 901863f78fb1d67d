"""Response decoding configuration."""

from pydantic import BaseModel, Field


class DecodeConfig(BaseModel):
    """Defaults applied when decoding JSON bodies into result types."""

    strict: bool | None = Field(
        default=None,
        description="Force strict (true) or lax (false) validation; unset defers to the result type",
    )
