"""File-based config store settings."""

from __future__ import annotations

from dataclasses import dataclass

from atlas.common import AppDirectories


@dataclass(frozen=True)
class ConfigFileNames:
    """Config file naming convention.

    Attributes:
        global_file: Filename for global config (~/.config/atlas/)
        project_file: Filename for project config (.atlas/)
        user_file: Filename for user-specific config (.atlas/)
    """

    global_file: str = "config.yaml"
    project_file: str = "config.yaml"
    user_file: str = "config.local.yaml"


@dataclass(frozen=True)
class ConfigStoreSettings:
    """Complete settings for file-based config store."""

    directories: AppDirectories
    filenames: ConfigFileNames
