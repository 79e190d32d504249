"""Public configuration API for Atlas."""

from __future__ import annotations

from .file import FileConfigStore
from .models import (
    ApiConfig,
    AtlasConfig,
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigScope,
    ConfigValidationError,
    ConfigYamlError,
)
from .protocol import ConfigStore

__all__ = [
    "ApiConfig",
    "AtlasConfig",
    "ConfigError",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigScope",
    "ConfigStore",
    "ConfigValidationError",
    "ConfigYamlError",
    "FileConfigStore",
]
