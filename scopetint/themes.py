"""Textual theme definitions derived from scopetint themes."""

from __future__ import annotations

from textual.theme import Theme as TextualTheme

from scopetint.colors import color_to_hex
from scopetint.graphics import Color
from scopetint.theme import Theme

# Fallback colors when a theme leaves a UI scope undefined
FALLBACK_COLORS = {
    "primary": "#88c0d0",
    "secondary": "#2e3440",
    "accent": "#88c0d0",
    "success": "#a3be8c",
    "warning": "#ebcb8b",
    "error": "#bf616a",
    "foreground": "#e5e9f0",
    "background": "#2e3440",
    "surface": "#3b4252",
    "panel": "#2e3440",
    "text_muted": "#d8dee9",
    "border": "#4c566a",
}

# Perceived luminance below which a background counts as dark
DARK_LUMINANCE_THRESHOLD = 0.5


def _pick(color: Color | None, fallback_key: str) -> str:
    fallback = FALLBACK_COLORS[fallback_key]
    return fallback if color is None else color_to_hex(color, fallback)


def _is_dark(hex_color: str) -> bool:
    red, green, blue = (int(hex_color[i : i + 2], 16) / 255 for i in (1, 3, 5))
    return 0.299 * red + 0.587 * green + 0.114 * blue < DARK_LUMINANCE_THRESHOLD


def to_textual_theme(theme: Theme) -> TextualTheme:
    """Build a Textual Theme from a scopetint theme's UI scopes.

    Args:
        theme: The resolved theme.

    Returns:
        A Textual Theme instance named like ``theme``.
    """
    background = _pick(theme.get("ui.background").bg, "background")
    foreground = _pick(theme.get("ui.text").fg, "foreground")
    statusline = theme.get("ui.statusline")

    return TextualTheme(
        name=theme.name,
        primary=_pick(theme.get("ui.statusline.normal").bg, "primary"),
        secondary=_pick(statusline.bg, "secondary"),
        accent=_pick(theme.get("ui.selection").bg, "accent"),
        warning=_pick(theme.get("warning").fg, "warning"),
        error=_pick(theme.get("error").fg, "error"),
        success=_pick(theme.get("diff.plus").fg, "success"),
        foreground=foreground,
        background=background,
        surface=_pick(theme.get("ui.popup").bg, "surface"),
        panel=_pick(theme.get("ui.menu").bg, "panel"),
        dark=_is_dark(background),
        variables={
            "border": _pick(theme.get("ui.window").fg, "border"),
            "text-muted": _pick(theme.get("ui.text.inactive").fg, "text_muted"),
        },
    )
