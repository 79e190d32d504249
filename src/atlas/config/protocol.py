"""Configuration storage protocol."""

from typing import Protocol

from result import Result

from .models import AtlasConfig, ConfigError, ConfigScope


class ConfigStore(Protocol):
    """Protocol for configuration retrieval."""

    def load(self) -> Result[AtlasConfig, ConfigError]:
        """Load and merge configuration from all scopes."""
        ...

    def load_scope(self, scope: ConfigScope) -> Result[AtlasConfig | None, ConfigError]:
        """Load configuration from a specific scope.

        Returns:
            Ok(AtlasConfig) when config file exists for the scope.
            Ok(None) when config file doesn't exist for the scope.
            Err(ConfigError) on any loading or validation errors.
        """
        ...
