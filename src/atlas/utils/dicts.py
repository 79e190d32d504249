"""Dictionary helpers used across Atlas."""

from __future__ import annotations

from collections.abc import Mapping

__all__ = ["deep_merge", "strip_none"]


def deep_merge(base: Mapping[str, object], override: Mapping[str, object]) -> dict[str, object]:
    """Recursively merge two mappings, giving precedence to override.

    Nested mappings are merged key by key; any other value, lists included,
    is replaced wholesale. ``None`` in ``override`` never clears a base value.
    """
    result: dict[str, object] = dict(base)

    for key, override_value in override.items():
        if override_value is None:
            continue

        existing_value = result.get(key)
        if isinstance(existing_value, Mapping) and isinstance(override_value, Mapping):
            result[key] = deep_merge(existing_value, override_value)
        elif isinstance(override_value, list):
            result[key] = list(override_value)
        else:
            result[key] = override_value

    return result


def strip_none(data: Mapping[str, object]) -> dict[str, object]:
    cleaned: dict[str, object] = {}
    for key, value in data.items():
        if value is None:
            continue
        cleaned[key] = strip_none(value) if isinstance(value, Mapping) else value
    return cleaned
