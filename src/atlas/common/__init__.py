"""Common models and types used across Atlas modules."""

from .fields import CountryCode, JsonDict, JsonValue, NonEmptyString
from .logging import (
    LoggingConfig,
    create_logger,
    default_log_file_path,
    disable_library_logging,
    enable_library_logging,
    setup_cli_logging,
)
from .models import AppDirectories, AppInfo, AppPaths
from .paths import (
    get_data_directory_from_dirs,
    get_global_config_root,
    get_project_root,
    resolve_project_dir,
    resolve_working_directory,
)

__all__ = [
    "AppDirectories",
    "AppInfo",
    "AppPaths",
    "CountryCode",
    "JsonDict",
    "JsonValue",
    "LoggingConfig",
    "NonEmptyString",
    "create_logger",
    "default_log_file_path",
    "disable_library_logging",
    "enable_library_logging",
    "get_data_directory_from_dirs",
    "get_global_config_root",
    "get_project_root",
    "resolve_project_dir",
    "resolve_working_directory",
    "setup_cli_logging",
]
