"""Tests for loading viewer configuration YAML."""

from __future__ import annotations

import typing as typ

import pytest

from termdocs.config import (
    DEFAULT_PALETTE,
    ConfigError,
    ThemeConfig,
    ViewerConfig,
    load_viewer_config,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "termdocs.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_none_returns_defaults() -> None:
    """Without a file the built-in configuration applies."""
    config = load_viewer_config(None)
    assert (config.width, config.height, config.min_width) == (80, 24, 1), (
        f"unexpected geometry {config!r}"
    )
    assert config.pygments_style == "monokai", "unexpected default style"
    assert config.theme.palette == DEFAULT_PALETTE, "default palette expected"


def test_yaml_overrides_geometry_style_and_palette(tmp_path: Path) -> None:
    """Every documented key is read from the YAML file."""
    path = _write(
        tmp_path,
        "viewport:\n"
        "  width: 100\n"
        "  height: 30\n"
        "  min_width: 20\n"
        "pygments_style: github-dark\n"
        "theme:\n"
        "  palette:\n"
        "    accent: '#ff00ff'\n"
        "    card_background: '#1b1b29'\n",
    )
    config = load_viewer_config(path)
    assert (config.width, config.height, config.min_width) == (100, 30, 20), (
        f"unexpected geometry {config!r}"
    )
    assert config.pygments_style == "github-dark", "style should be overridden"
    assert config.theme.resolve("accent") == "#ff00ff", "accent should be overridden"
    assert config.theme.resolve("card_background") == "#1b1b29", (
        "background should be overridden"
    )
    assert config.theme.resolve("text") == DEFAULT_PALETTE["text"], (
        "untouched intents keep their defaults"
    )


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """An empty YAML document is the same as no overrides."""
    config = load_viewer_config(_write(tmp_path, ""))
    assert config == ViewerConfig(), f"unexpected config {config!r}"


def test_missing_file_raises(tmp_path: Path) -> None:
    """A configured but absent file is an error."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_viewer_config(tmp_path / "absent.yaml")


def test_non_mapping_top_level_raises(tmp_path: Path) -> None:
    """The YAML root must be a mapping."""
    with pytest.raises(TypeError, match="mapping"):
        load_viewer_config(_write(tmp_path, "- one\n- two\n"))


@pytest.mark.parametrize(
    ("text", "match"),
    [
        ("viewport:\n  width: 0\n", "width"),
        ("viewport:\n  height: -4\n", "height"),
        ("viewport:\n  width: wide\n", "width"),
        ("viewport:\n  min_width: true\n", "min_width"),
        ("viewport: 80\n", "viewport"),
        ("theme:\n  palette:\n    sparkle: '#fff'\n", "Unknown colour intent"),
        ("theme: dark\n", "theme"),
        ("theme:\n  palette: [accent]\n", "theme.palette"),
    ],
)
def test_invalid_values_raise_config_error(tmp_path: Path, text: str, match: str) -> None:
    """Invalid geometry and palette entries are rejected with a clear message."""
    with pytest.raises(ConfigError, match=match):
        load_viewer_config(_write(tmp_path, text))


def test_inherit_colour_resolves_to_none() -> None:
    """The ``default`` sentinel and unknown intents leave colour unset."""
    theme = ThemeConfig()
    assert theme.resolve("card_background") is None, "background should inherit"
    assert theme.resolve(None) is None, "no intent means no colour"
    assert theme.resolve("missing") is None, "unknown intent means no colour"
