"""Atlas - browse, search, filter and bookmark countries.

By default, Atlas's internal logging is disabled when used as a library.
Library users can enable logging by calling atlas.enable_logging().
"""

from atlas.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
