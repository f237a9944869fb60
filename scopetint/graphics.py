"""Color, modifier and style values shared by parsers and renderers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, Flag, auto
from typing import TypeAlias


class AnsiColor(Enum):
    """The terminal's default color plus the 16 named ANSI colors."""

    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    LIGHT_RED = "light-red"
    LIGHT_GREEN = "light-green"
    LIGHT_YELLOW = "light-yellow"
    LIGHT_BLUE = "light-blue"
    LIGHT_MAGENTA = "light-magenta"
    LIGHT_CYAN = "light-cyan"
    LIGHT_GRAY = "light-gray"
    WHITE = "white"


@dataclass(frozen=True)
class RgbColor:
    """A 24-bit true color."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"RGB channel out of range: {channel}")

    @property
    def hex(self) -> str:
        """Lower-case ``#rrggbb`` form of the color."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass(frozen=True)
class IndexedColor:
    """A color from the 256-color terminal palette."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 255:
            raise ValueError(f"Color index out of range: {self.index}")


Color: TypeAlias = AnsiColor | RgbColor | IndexedColor


class Modifier(Flag):
    """Text attribute flags."""

    BOLD = auto()
    DIM = auto()
    ITALIC = auto()
    SLOW_BLINK = auto()
    RAPID_BLINK = auto()
    REVERSED = auto()
    HIDDEN = auto()
    CROSSED_OUT = auto()

    @classmethod
    def from_name(cls, name: str) -> Modifier:
        """Parse a modifier from its theme-file spelling.

        Args:
            name: Lower-case name such as ``"bold"`` or ``"crossed_out"``.

        Returns:
            The matching modifier flag.

        Raises:
            ValueError: If the name is not a known modifier.
        """
        member = cls.__members__.get(name.upper()) if name.islower() else None
        if member is None:
            raise ValueError(f"Invalid modifier: {name!r}")
        return member


NO_MODIFIERS = Modifier(0)


class UnderlineStyle(Enum):
    """Underline shapes supported by modern terminals."""

    RESET = "reset"
    LINE = "line"
    CURL = "curl"
    DOTTED = "dotted"
    DASHED = "dashed"
    DOUBLE_LINE = "double_line"

    @classmethod
    def from_name(cls, name: str) -> UnderlineStyle:
        """Parse an underline style from its theme-file spelling.

        Raises:
            ValueError: If the name is not a known underline style.
        """
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Invalid underline style: {name!r}") from None


@dataclass(frozen=True)
class Style:
    """A set of optional colors, an underline and modifier changes.

    ``add_modifier`` and ``sub_modifier`` record flags to switch on and off
    when this style is patched over another one. Unset fields leave the
    underlying style untouched.
    """

    fg: Color | None = None
    bg: Color | None = None
    underline_color: Color | None = None
    underline_style: UnderlineStyle | None = None
    add_modifier: Modifier = NO_MODIFIERS
    sub_modifier: Modifier = NO_MODIFIERS

    def with_fg(self, color: Color) -> Style:
        return replace(self, fg=color)

    def with_bg(self, color: Color) -> Style:
        return replace(self, bg=color)

    def with_underline_color(self, color: Color) -> Style:
        return replace(self, underline_color=color)

    def with_underline_style(self, underline: UnderlineStyle) -> Style:
        return replace(self, underline_style=underline)

    def with_modifier(self, modifier: Modifier) -> Style:
        """Return a copy that switches ``modifier`` on."""
        return replace(
            self,
            add_modifier=self.add_modifier | modifier,
            sub_modifier=self.sub_modifier & ~modifier,
        )

    def without_modifier(self, modifier: Modifier) -> Style:
        """Return a copy that switches ``modifier`` off."""
        return replace(
            self,
            add_modifier=self.add_modifier & ~modifier,
            sub_modifier=self.sub_modifier | modifier,
        )

    def patch(self, other: Style) -> Style:
        """Overlay ``other`` on this style.

        Fields set on ``other`` win; unset fields keep this style's values.
        Modifier changes from ``other`` are applied on top of this style's.

        Args:
            other: The style to apply.

        Returns:
            The combined style.
        """
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            underline_color=other.underline_color if other.underline_color is not None else self.underline_color,
            underline_style=other.underline_style if other.underline_style is not None else self.underline_style,
            add_modifier=(self.add_modifier & ~other.sub_modifier) | other.add_modifier,
            sub_modifier=(self.sub_modifier & ~other.add_modifier) | other.sub_modifier,
        )

    def uses_rgb(self) -> bool:
        """Check whether the foreground or background is a true color."""
        return isinstance(self.fg, RgbColor) or isinstance(self.bg, RgbColor)
