"""Load and validate viewer configuration YAML for termdocs.

This subpackage parses an optional ``termdocs.yaml`` file, merges palette
overrides with the built-in theme, and produces typed dataclasses
(:class:`ViewerConfig`, :class:`ThemeConfig`) that the CLI consumes. The
primary entry point is :func:`load_viewer_config`.

Examples
--------
>>> from pathlib import Path
>>> from termdocs.config import load_viewer_config
>>> config = load_viewer_config(Path("termdocs.yaml"))  # doctest: +SKIP
>>> config.theme.resolve("accent")  # doctest: +SKIP
'#7db3ff'
"""

from .loader import load_viewer_config
from .models import DEFAULT_PALETTE, ConfigError, ThemeConfig, ViewerConfig

__all__ = [
    "DEFAULT_PALETTE",
    "ConfigError",
    "ThemeConfig",
    "ViewerConfig",
    "load_viewer_config",
]
