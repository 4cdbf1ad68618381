"""Configuration loader for the novel import core."""

import os
from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Novel Import"
    version: str = "1.0.0"
    language: str = "zh"


class ImportConfig(BaseModel):
    """Defaults applied to a fresh import session."""

    default_encoding: Literal["utf-8", "gbk", "auto"] = "utf-8"
    default_mode: Literal["regex", "single"] = "regex"

    @field_validator("default_encoding", mode="before")
    @classmethod
    def _lower_encoding(cls, value: object) -> object:
        # Encoding tags are case-insensitive, like codec names
        return value.lower() if isinstance(value, str) else value


class LoggingConfig(BaseModel):
    """Logging configuration for the command line entry point."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    importing: ImportConfig = Field(default_factory=ImportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Environment variable -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "NOVEL_IMPORT_ENCODING": ("importing", "default_encoding"),
    "NOVEL_IMPORT_MODE": ("importing", "default_mode"),
    "NOVEL_IMPORT_LOG_LEVEL": ("logging", "level"),
}


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Environment variables (also read from a ``.env`` file) take
    precedence over the YAML values. Both sources are validated
    together, so an unknown encoding, mode or log level fails here.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.

    Raises:
        pydantic.ValidationError: If a value is not allowed.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

    # Override from environment
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            section_data = yaml_data.get(section) or {}
            section_data[key] = value
            yaml_data[section] = section_data

    return AppConfig(**yaml_data)
