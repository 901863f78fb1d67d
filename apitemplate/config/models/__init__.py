"""Configuration section models."""

from apitemplate.config.models.decode import DecodeConfig
from apitemplate.config.models.http import HttpConfig
from apitemplate.config.models.logging import LoggingConfig

__all__ = ["DecodeConfig", "HttpConfig", "LoggingConfig"]
