"""Apply theme style attributes onto a Style."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from scopetint.errors import (
    InvalidAttributeError,
    InvalidModifierError,
    InvalidUnderlineAttributeError,
    InvalidUnderlineStyleError,
    ThemeValueError,
)
from scopetint.graphics import Modifier, Style, UnderlineStyle
from scopetint.palette import Palette

# Kept for themes written before underline styles existed
LEGACY_UNDERLINE_MODIFIER = "underlined"


def parse_modifier(value: object) -> Modifier:
    """Parse a modifier token.

    Raises:
        InvalidModifierError: If the token is not a modifier name.
    """
    if not isinstance(value, str):
        raise InvalidModifierError(value)
    try:
        return Modifier.from_name(value)
    except ValueError:
        raise InvalidModifierError(value) from None


def parse_underline_style(value: object) -> UnderlineStyle:
    """Parse an underline style token.

    Raises:
        InvalidUnderlineStyleError: If the token is not an underline style name.
    """
    if not isinstance(value, str):
        raise InvalidUnderlineStyleError(value)
    try:
        return UnderlineStyle.from_name(value)
    except ValueError:
        raise InvalidUnderlineStyleError(value) from None


def _apply_underline(style: Style, value: object, palette: Palette) -> Style:
    if not isinstance(value, Mapping):
        raise InvalidAttributeError("underline", "underline must be a table")
    try:
        if "color" in value:
            style = style.with_underline_color(palette.resolve(value["color"]))
        if "style" in value:
            style = style.with_underline_style(parse_underline_style(value["style"]))
    except ThemeValueError as exc:
        exc.partial = style
        raise
    for key in value:
        if key not in ("color", "style"):
            exc = InvalidUnderlineAttributeError(key)
            exc.partial = style
            raise exc
    return style


def _apply_modifiers(style: Style, value: object) -> Style:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise InvalidAttributeError("modifiers", "modifiers should be an array")
    for token in value:
        if token == LEGACY_UNDERLINE_MODIFIER:
            style = style.with_underline_style(UnderlineStyle.LINE)
            continue
        try:
            style = style.with_modifier(parse_modifier(token))
        except InvalidModifierError as exc:
            exc.partial = style
            raise
    return style


def apply_style(style: Style, value: object, palette: Palette) -> Style:
    """Apply a raw theme value to a style.

    A scalar value is a foreground color. A table may contain ``fg``, ``bg``,
    ``underline`` and ``modifiers``, applied in document order.

    Args:
        style: The style to build on.
        value: The raw value of a scope entry.
        palette: Palette used to resolve color tokens.

    Returns:
        The style with every attribute applied.

    Raises:
        ThemeValueError: If an attribute is malformed. The style assembled
            before the failing attribute is available as ``partial``.
    """
    try:
        if not isinstance(value, Mapping):
            return style.with_fg(palette.resolve(value))

        for key, item in value.items():
            if key == "fg":
                style = style.with_fg(palette.resolve(item))
            elif key == "bg":
                style = style.with_bg(palette.resolve(item))
            elif key == "underline":
                style = _apply_underline(style, item, palette)
            elif key == "modifiers":
                style = _apply_modifiers(style, item)
            else:
                raise InvalidAttributeError(key)
    except ThemeValueError as exc:
        if exc.partial is None:
            exc.partial = style
        raise
    return style
