"""File-based configuration store implementation."""

from __future__ import annotations

from pathlib import Path

from result import Err, Ok, Result, is_err

from atlas.common import create_logger

from ..loader import ScopeConfig, load_scope_config
from ..merger import merge_configs
from ..models import AtlasConfig, ConfigError, ConfigScope
from ..resolver import apply_env_overrides
from .paths import ResolvedConfigPaths, discover_config_paths
from .settings import ConfigStoreSettings

logger = create_logger("config")

_FILE_SCOPES = (ConfigScope.GLOBAL, ConfigScope.PROJECT, ConfigScope.USER)


class FileConfigStore:
    def __init__(self, settings: ConfigStoreSettings, working_dir: Path | None = None) -> None:
        self.working_dir = working_dir or Path.cwd()
        self.settings = settings

    def load(self) -> Result[AtlasConfig, ConfigError]:
        logger.debug("Loading config", working_dir=str(self.working_dir))
        paths = discover_config_paths(self.working_dir, self.settings)

        logger.debug(
            "Config paths discovered",
            global_path=str(paths.global_path) if paths.global_path else None,
            project_path=str(paths.project_path) if paths.project_path else None,
            user_path=str(paths.user_path) if paths.user_path else None,
        )

        return (
            self._load_all_scopes(paths)
            .map(merge_configs)
            .map(apply_env_overrides)
            .inspect_err(lambda error: logger.error("Config load failed", scope=error.scope.value, error=error.message))
        )

    def load_scope(self, scope: ConfigScope) -> Result[AtlasConfig | None, ConfigError]:
        if scope is ConfigScope.EFFECTIVE:
            return self.load()

        path = discover_config_paths(self.working_dir, self.settings).for_scope(scope)
        if path is None:
            return Ok(None)

        return load_scope_config(path, scope).map(lambda config: merge_configs([config]))

    def _load_all_scopes(self, paths: ResolvedConfigPaths) -> Result[list[ScopeConfig | None], ConfigError]:
        configs: list[ScopeConfig | None] = []
        for scope in _FILE_SCOPES:
            path = paths.for_scope(scope)
            if path is None:
                configs.append(None)
                continue

            result = load_scope_config(path, scope)
            if is_err(result):
                return Err(result.unwrap_err())
            configs.append(result.unwrap())

        return Ok(configs)
