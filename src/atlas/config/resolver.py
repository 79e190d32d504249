"""Environment variable resolution helpers for configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping

import yaml

from atlas.common import JsonDict
from atlas.constants import ENV_PREFIX
from atlas.utils import deep_merge

from .models import AtlasConfig


def apply_env_overrides(config: AtlasConfig, environ: Mapping[str, str] | None = None) -> AtlasConfig:
    """Apply ``ATLAS_CONFIG__SECTION__KEY=value`` overrides to config."""
    override_data: JsonDict = {}

    for key, value in (os.environ if environ is None else environ).items():
        if not key.startswith(f"{ENV_PREFIX}__"):
            continue
        segments = [segment.lower() for segment in key[len(ENV_PREFIX) :].split("__") if segment]
        if not segments:
            continue
        _insert_override(override_data, segments, _parse_env_value(value))

    if not override_data:
        return config

    return AtlasConfig.model_validate(deep_merge(config.model_dump(mode="json"), override_data))


def _insert_override(data: JsonDict, path: list[str], value: object) -> None:
    cursor = data
    *parents, leaf = path
    for segment in parents:
        child = cursor.get(segment)
        if not isinstance(child, dict):
            child = {}
            cursor[segment] = child
        cursor = child
    cursor[leaf] = value


def _parse_env_value(raw: str) -> object:
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
