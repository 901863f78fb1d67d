"""Logging configuration."""

from typing import Literal

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Structured logging output settings."""

    format: Literal["json", "console"] = Field(
        default="json",
        description="Log renderer: json for production, console for development",
    )
    redact_sensitive: bool = Field(
        default=True,
        description="Mask credentials in logged fields and query strings",
    )
