"""Data models for music catalog."""

from .config import Config, DisplayConfig, LoggingConfig

__all__ = ["Config", "DisplayConfig", "LoggingConfig"]
