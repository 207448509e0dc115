"""Load viewer configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from termdocs.errors import ConfigError

from .helpers import _merge_theme, _optional_int
from .models import ThemeConfig, ViewerConfig

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_viewer_config(path: Path | None) -> ViewerConfig:
    """Load the YAML configuration describing viewport and theme choices.

    Parameters
    ----------
    path : Path or None
        Filesystem path to the YAML configuration file (for example,
        ``termdocs.yaml``). ``None`` returns the built-in defaults.

    Returns
    -------
    ViewerConfig
        Parsed configuration with defaults applied to missing keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ConfigError
        If a value is invalid (for example, a non-positive width or an
        unknown colour intent).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from termdocs.config import load_viewer_config
    >>> load_viewer_config(None).width
    80
    """
    if path is None:
        return ViewerConfig()
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    viewport = raw.get("viewport", {}) or {}
    if not isinstance(viewport, dict):
        msg = "'viewport' must be a mapping of width, height and min_width."
        raise ConfigError(msg)
    defaults = ViewerConfig()

    return ViewerConfig(
        width=_optional_int(viewport.get("width"), "width", defaults.width),
        height=_optional_int(viewport.get("height"), "height", defaults.height),
        min_width=_optional_int(viewport.get("min_width"), "min_width", defaults.min_width),
        pygments_style=str(raw.get("pygments_style", defaults.pygments_style)),
        theme=_merge_theme(ThemeConfig(), raw.get("theme")),
    )


__all__ = ["load_viewer_config"]
