"""Pydantic models for Atlas configuration scopes and errors."""

from __future__ import annotations

from typing import TypeAlias

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, model_validator

from atlas.common import LoggingConfig, NonEmptyString
from atlas.constants import DEFAULT_API_BASE_URL, DEFAULT_API_TIMEOUT, DEFAULT_LIST_FIELDS


class ConfigScope(str, Enum):
    """Configuration scope levels."""

    GLOBAL = "global"
    PROJECT = "project"
    USER = "user"
    EFFECTIVE = "effective"


class ConfigNotFoundError(BaseModel):
    """Configuration file not found at expected location."""

    model_config = ConfigDict(extra="forbid")

    scope: ConfigScope
    expected_path: Path
    message: str


class ConfigYamlError(BaseModel):
    """YAML parsing error in configuration file."""

    model_config = ConfigDict(extra="forbid")

    scope: ConfigScope
    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """Schema validation error in configuration."""

    model_config = ConfigDict(extra="forbid")

    scope: ConfigScope
    path: Path
    field: str | None = None
    message: str


class ConfigIOError(BaseModel):
    """File I/O error reading configuration."""

    model_config = ConfigDict(extra="forbid")

    scope: ConfigScope
    path: Path
    message: str


ConfigError: TypeAlias = ConfigNotFoundError | ConfigYamlError | ConfigValidationError | ConfigIOError


class ApiConfig(BaseModel):
    """REST Countries endpoint settings."""

    model_config = ConfigDict(extra="forbid")

    base_url: NonEmptyString = DEFAULT_API_BASE_URL
    timeout: PositiveFloat = DEFAULT_API_TIMEOUT
    list_fields: list[str] = Field(default_factory=lambda: list(DEFAULT_LIST_FIELDS), max_length=10)


def _reject_logging(data: object, location: str) -> object:
    if isinstance(data, dict) and "logging" in data:
        raise ValueError(
            "Logging configuration can only be set in global config (~/.config/atlas/config.yaml). "
            f"Remove 'logging' from {location}."
        )
    return data


class GlobalConfig(BaseModel):
    """Global configuration (~/.config/atlas/config.yaml)."""

    model_config = ConfigDict(extra="allow")

    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ProjectConfig(BaseModel):
    """Project configuration (.atlas/config.yaml)."""

    model_config = ConfigDict(extra="allow")

    api: ApiConfig = Field(default_factory=ApiConfig)

    @model_validator(mode="before")
    @classmethod
    def _validate_no_logging(cls, data: object) -> object:
        return _reject_logging(data, "project config (.atlas/config.yaml)")


class UserConfig(BaseModel):
    """User configuration (.atlas/config.local.yaml)."""

    model_config = ConfigDict(extra="allow")

    api: ApiConfig = Field(default_factory=ApiConfig)

    @model_validator(mode="before")
    @classmethod
    def _validate_no_logging(cls, data: object) -> object:
        return _reject_logging(data, "user config (.atlas/config.local.yaml)")


class AtlasConfig(BaseModel):
    """Effective configuration (merged result)."""

    model_config = ConfigDict(extra="allow")

    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
