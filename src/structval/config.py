"""Configuration management for structval using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from structval.casing import NameCase
from structval.paths import SEPARATOR

CONFIG_FILE_NAME = ".structval.json"


class ReportFormat(str, Enum):
    """Report format types."""
    TABLE = "table"
    JSON = "json"
    MARKDOWN = "markdown"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ValidationConfig(BaseModel):
    """Validation configuration section."""
    name_case: NameCase = Field(alias="nameCase", default=NameCase.AS_DECLARED)
    locale: str = "en"

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v):
        if not v.strip():
            raise ValueError("locale must not be empty")
        return v

    model_config = ConfigDict(populate_by_name=True)


class OutputConfig(BaseModel):
    """Output configuration section."""
    format: ReportFormat = ReportFormat.TABLE

    model_config = ConfigDict(use_enum_values=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class StructvalConfig(BaseModel):
    """Complete structval configuration model."""
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    rules: dict[str, str] = Field(default_factory=dict)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("rules")
    @classmethod
    def validate_rule_keys(cls, v):
        """Rule table keys are dotted paths, e.g. '.user.email' or '.*.id'."""
        bad = [key for key in v if key and not key.startswith(SEPARATOR)]
        if bad:
            raise ValueError(f"rule keys must start with '{SEPARATOR}', got: {', '.join(bad)}")
        return v

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> StructvalConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .structval.json

    Returns:
        StructvalConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
            return StructvalConfig(**config_data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .structval.json configuration file by searching up directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> StructvalConfig:
    """Create default configuration: declared field names, English messages, no rules."""
    return StructvalConfig()
