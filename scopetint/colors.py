"""Conversion of theme styles to Rich styles.

Usage:
    from scopetint.colors import to_rich_style

    console.print("Error!", style=to_rich_style(theme.get("error")))
"""

from __future__ import annotations

from rich.color import Color as RichColor
from rich.style import Style as RichStyle

from scopetint.graphics import AnsiColor, Color, IndexedColor, Modifier, RgbColor, Style, UnderlineStyle

# Standard ANSI numbers; "gray" is bright black and "light-gray" is plain white
ANSI_NUMBERS: dict[AnsiColor, int] = {
    AnsiColor.BLACK: 0,
    AnsiColor.RED: 1,
    AnsiColor.GREEN: 2,
    AnsiColor.YELLOW: 3,
    AnsiColor.BLUE: 4,
    AnsiColor.MAGENTA: 5,
    AnsiColor.CYAN: 6,
    AnsiColor.LIGHT_GRAY: 7,
    AnsiColor.GRAY: 8,
    AnsiColor.LIGHT_RED: 9,
    AnsiColor.LIGHT_GREEN: 10,
    AnsiColor.LIGHT_YELLOW: 11,
    AnsiColor.LIGHT_BLUE: 12,
    AnsiColor.LIGHT_MAGENTA: 13,
    AnsiColor.LIGHT_CYAN: 14,
    AnsiColor.WHITE: 15,
}

_MODIFIER_ATTRIBUTES: dict[Modifier, str] = {
    Modifier.BOLD: "bold",
    Modifier.DIM: "dim",
    Modifier.ITALIC: "italic",
    Modifier.SLOW_BLINK: "blink",
    Modifier.RAPID_BLINK: "blink2",
    Modifier.REVERSED: "reverse",
    Modifier.HIDDEN: "conceal",
    Modifier.CROSSED_OUT: "strike",
}


def to_rich_color(color: Color) -> RichColor:
    """Convert a theme color to a Rich color.

    Args:
        color: Theme color.

    Returns:
        The equivalent Rich color. ``AnsiColor.RESET`` maps to the terminal default.
    """
    if isinstance(color, RgbColor):
        return RichColor.from_rgb(color.red, color.green, color.blue)
    if isinstance(color, IndexedColor):
        return RichColor.from_ansi(color.index)
    if color is AnsiColor.RESET:
        return RichColor.default()
    return RichColor.from_ansi(ANSI_NUMBERS[color])


def color_to_hex(color: Color, fallback: str) -> str:
    """Get a ``#rrggbb`` string for a theme color.

    Named and indexed colors use Rich's default terminal palette.

    Args:
        color: Theme color.
        fallback: Returned for ``AnsiColor.RESET``, which has no fixed value.

    Returns:
        Hex color string.
    """
    if isinstance(color, RgbColor):
        return color.hex
    if color is AnsiColor.RESET:
        return fallback
    return to_rich_color(color).get_truecolor().hex


def to_rich_style(style: Style) -> RichStyle:
    """Convert a theme style to a Rich style.

    Rich has no underline colors, so ``underline_color`` is dropped.

    Args:
        style: Theme style.

    Returns:
        The equivalent Rich style.
    """
    attributes: dict[str, bool] = {}
    for modifier, attribute in _MODIFIER_ATTRIBUTES.items():
        if modifier in style.add_modifier:
            attributes[attribute] = True
        elif modifier in style.sub_modifier:
            attributes[attribute] = False

    if style.underline_style is UnderlineStyle.DOUBLE_LINE:
        attributes["underline2"] = True
    elif style.underline_style is UnderlineStyle.RESET:
        attributes["underline"] = False
    elif style.underline_style is not None:
        attributes["underline"] = True

    return RichStyle(
        color=to_rich_color(style.fg) if style.fg is not None else None,
        bgcolor=to_rich_color(style.bg) if style.bg is not None else None,
        **attributes,
    )
