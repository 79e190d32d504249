"""Common models used across Atlas."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel

from atlas.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "dev"


class AppPaths(BaseModel):
    config_dir_name: str = APP_NAME
    data_dir_name: str = APP_NAME
    project_subdir_name: str = f".{APP_NAME}"
    global_config_filename: str = "config.yaml"
    project_config_filename: str = "config.yaml"
    user_config_filename: str = "config.local.yaml"
    log_filename: str = f"{APP_NAME}.log"


@dataclass(frozen=True)
class AppDirectories:
    """Where Atlas keeps its files.

    - ~/.config/{app_name}/
    - ~/.local/share/{app_name}/
    - ./{project_marker}/

    Attributes:
        app_name: Name used in XDG directories (config and data)
        project_marker: Directory name that marks an Atlas project root
    """

    app_name: str = APP_NAME
    project_marker: str = f".{APP_NAME}"
