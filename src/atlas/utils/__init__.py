from .dicts import deep_merge, strip_none

__all__ = ["deep_merge", "strip_none"]
