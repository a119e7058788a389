"""Configuration module for table extraction."""

from table_extract.config.settings import (
    ExtractionSettings,
    LoggingSettings,
    ParserSettings,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "ParserSettings",
    "ExtractionSettings",
    "LoggingSettings",
    "get_settings",
]
