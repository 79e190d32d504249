from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from atlas.common import get_global_config_root, get_project_root, resolve_project_dir, resolve_working_directory

from ..models import ConfigScope
from .settings import ConfigStoreSettings


@dataclass(frozen=True, slots=True)
class ResolvedConfigPaths:
    global_path: Path | None
    project_path: Path | None
    user_path: Path | None

    def for_scope(self, scope: ConfigScope) -> Path | None:
        match scope:
            case ConfigScope.GLOBAL:
                return self.global_path
            case ConfigScope.PROJECT:
                return self.project_path
            case ConfigScope.USER:
                return self.user_path
            case _:
                raise ValueError(f"Unexpected scope: {scope}")


def discover_config_paths(working_dir: Path | None, settings: ConfigStoreSettings) -> ResolvedConfigPaths:
    """Locate the config files that exist for each scope."""
    directories = settings.directories
    filenames = settings.filenames

    global_candidate = get_global_config_root(directories) / filenames.global_file

    project_path = user_path = None
    project_root = get_project_root(resolve_working_directory(working_dir), directories)
    project_dir = resolve_project_dir(project_root, directories)
    if project_dir is not None:
        project_path = _existing(project_dir / filenames.project_file)
        user_path = _existing(project_dir / filenames.user_file)

    return ResolvedConfigPaths(
        global_path=_existing(global_candidate),
        project_path=project_path,
        user_path=user_path,
    )


def _existing(candidate: Path) -> Path | None:
    return candidate if candidate.is_file() else None
