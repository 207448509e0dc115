"""Typed dataclasses describing termdocs viewer configuration."""

from __future__ import annotations

import dataclasses as dc

from termdocs.errors import ConfigError

INHERIT_COLOR = "default"

DEFAULT_PALETTE: dict[str, str] = {
    "text": "#eceaf4",
    "dim_text": "#a19ab6",
    "accent": "#7db3ff",
    "info": "#8ab8ff",
    "warning": "#ffc76a",
    "error": "#ff7b72",
    "success": "#7ee787",
    "section_heading": "#9cc4ff",
    "section_subheading": "#7db3ff",
    "command_prompt": "#8ab8ff",
    "card_background": INHERIT_COLOR,
    "command_bar_background": INHERIT_COLOR,
    "warning_background": INHERIT_COLOR,
}


@dc.dataclass(slots=True)
class ThemeConfig:
    """Colour palette mapping symbolic intents to terminal colours.

    A value of ``"default"`` leaves the terminal's own colour in place.
    """

    palette: dict[str, str] = dc.field(default_factory=lambda: dict(DEFAULT_PALETTE))

    def resolve(self, intent: str | None) -> str | None:
        """Return the colour for ``intent`` or ``None`` to inherit."""
        if intent is None:
            return None
        color = self.palette.get(intent)
        if not color or color == INHERIT_COLOR:
            return None
        return color


@dc.dataclass(slots=True)
class ViewerConfig:
    """Viewport geometry and snapshot settings for the CLI."""

    width: int = 80
    height: int = 24
    min_width: int = 1
    pygments_style: str = "monokai"
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)

    def __post_init__(self) -> None:
        """Reject geometry the layout engine cannot honour."""
        for name in ("width", "height", "min_width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                msg = f"'{name}' must be a positive integer, got {value!r}."
                raise ConfigError(msg)


__all__ = ["DEFAULT_PALETTE", "INHERIT_COLOR", "ConfigError", "ThemeConfig", "ViewerConfig"]
