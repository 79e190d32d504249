from .settings import ConfigFileNames, ConfigStoreSettings
from .store import FileConfigStore

__all__ = ["ConfigFileNames", "ConfigStoreSettings", "FileConfigStore"]
