"""Configuration merging utilities."""

from __future__ import annotations

from collections.abc import Iterable

from atlas.utils import deep_merge, strip_none

from .models import AtlasConfig, GlobalConfig, ProjectConfig, UserConfig


def merge_configs(scopes: Iterable[GlobalConfig | ProjectConfig | UserConfig | None]) -> AtlasConfig:
    """Merge scope configs in order; later scopes win.

    Only keys a scope file actually set take part, so a project file that
    overrides ``api.timeout`` keeps the global ``api.base_url``.
    """
    merged: dict[str, object] = {}

    for scope in scopes:
        if scope is None:
            continue
        merged = deep_merge(merged, strip_none(scope.model_dump(mode="json", exclude_unset=True)))

    return AtlasConfig.model_validate(merged)
