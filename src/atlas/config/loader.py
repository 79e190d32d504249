"""Configuration file loading and validation helpers."""

from __future__ import annotations

from typing import TypeAlias

from pathlib import Path

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result

from .models import (
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigScope,
    ConfigValidationError,
    ConfigYamlError,
    GlobalConfig,
    ProjectConfig,
    UserConfig,
)

ScopeConfig: TypeAlias = GlobalConfig | ProjectConfig | UserConfig

_SCOPE_MODELS: dict[ConfigScope, type[ScopeConfig]] = {
    ConfigScope.GLOBAL: GlobalConfig,
    ConfigScope.PROJECT: ProjectConfig,
    ConfigScope.USER: UserConfig,
}


def load_scope_config(path: Path, scope: ConfigScope) -> Result[ScopeConfig, ConfigError]:
    """Load and validate one scope's YAML file."""
    model_cls = _SCOPE_MODELS.get(scope)
    if model_cls is None:
        raise ValueError(f"Scope '{scope.value}' has no configuration file")

    if not path.is_file():
        return Err(
            ConfigNotFoundError(
                scope=scope,
                expected_path=path,
                message=f"Configuration file not found for scope '{scope.value}'.",
            )
        )

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        return Err(ConfigIOError(scope=scope, path=path, message=str(exc)))

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        return Err(
            ConfigYamlError(
                scope=scope,
                path=path,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=str(exc),
            )
        )

    if data is None:
        data = {}

    if not isinstance(data, dict):
        return Err(
            ConfigValidationError(
                scope=scope,
                path=path,
                message="Configuration root must be a mapping of keys to values.",
            )
        )

    try:
        return Ok(model_cls.model_validate(data))
    except ValidationError as exc:
        return Err(_validation_error(scope, path, exc))


def _validation_error(scope: ConfigScope, path: Path, exc: ValidationError) -> ConfigValidationError:
    field = None
    message = str(exc)
    details = exc.errors()
    if details:
        first = details[0]
        field = ".".join(str(part) for part in first.get("loc") or ()) or None
        message = first.get("msg", message)
    return ConfigValidationError(scope=scope, path=path, field=field, message=message)
