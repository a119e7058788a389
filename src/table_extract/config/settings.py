"""Centralized settings management using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ParserBackend = Literal["lxml", "html.parser", "html5lib"]


class ParserSettings(BaseSettings):
    """HTML parser configuration."""

    model_config = SettingsConfigDict(env_prefix="TABLE_EXTRACT_PARSER_")

    backend: ParserBackend = Field(
        default="lxml",
        description="BeautifulSoup tree builder used for str/bytes input",
    )


class ExtractionSettings(BaseSettings):
    """Cell text extraction configuration."""

    model_config = SettingsConfigDict(env_prefix="TABLE_EXTRACT_")

    normalize_whitespace: bool = Field(
        default=False,
        description="Collapse internal whitespace runs in cell text to one space",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    format: Literal["json", "console"] = Field(default="console", description="Log format")


class Settings(BaseSettings):
    """Main settings class aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    parser: ParserSettings = Field(default_factory=ParserSettings)
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
