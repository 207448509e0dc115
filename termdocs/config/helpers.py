"""Utility helpers shared by the termdocs configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from termdocs.errors import ConfigError

from .models import DEFAULT_PALETTE, ThemeConfig


def _merge_theme(
    base: ThemeConfig, override: typ.Mapping[str, typ.Any] | None
) -> ThemeConfig:
    """Merge an override palette mapping into the base ThemeConfig."""
    if not override:
        return base
    if not isinstance(override, cabc.Mapping):
        msg = "'theme' must be a mapping with a 'palette' key."
        raise ConfigError(msg)
    overrides = override.get("palette") or {}
    if not isinstance(overrides, cabc.Mapping):
        msg = "'theme.palette' must be a mapping of intent names to colours."
        raise ConfigError(msg)
    palette = dict(base.palette)
    for intent, color in overrides.items():
        if intent not in DEFAULT_PALETTE:
            known = ", ".join(sorted(DEFAULT_PALETTE))
            msg = f"Unknown colour intent '{intent}'. Known intents: {known}"
            raise ConfigError(msg)
        palette[intent] = str(color).strip()
    return ThemeConfig(palette=palette)


def _optional_int(value: object, name: str, default: int) -> int:
    """Return ``value`` as an int, ``default`` when unset."""
    if value is None:
        return default
    if isinstance(value, bool):
        msg = f"'{name}' must be an integer, got {value!r}."
        raise ConfigError(msg)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        msg = f"'{name}' must be an integer, got {value!r}."
        raise ConfigError(msg) from exc


__all__ = ["_merge_theme", "_optional_int"]
