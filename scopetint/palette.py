"""Named color lookup for a single theme document."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from scopetint.errors import MalformedColorError, UnrecognizedValueError
from scopetint.graphics import AnsiColor, Color, RgbColor
from scopetint.logger import get_logger

logger = get_logger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

BUILTIN_COLORS: Mapping[str, Color] = MappingProxyType(
    {color.value: color for color in AnsiColor if color is not AnsiColor.RESET}
)


def parse_hex_color(token: str) -> RgbColor:
    """Parse a ``#RRGGBB`` hex code.

    Characters after the sixth hex digit are ignored.

    Args:
        token: Candidate hex code.

    Returns:
        The parsed true color.

    Raises:
        MalformedColorError: If the token is not a hex code.
    """
    digits = token[1:7]
    if not token.startswith("#") or len(digits) < 6 or not _HEX_DIGITS.issuperset(digits):
        raise MalformedColorError(token)
    return RgbColor(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _expect_str(value: object) -> str:
    if not isinstance(value, str):
        raise UnrecognizedValueError(value)
    return value


class Palette:
    """The 16 built-in colors overlaid with a document's ``palette`` table."""

    def __init__(self, colors: Mapping[str, Color] | None = None) -> None:
        """Initialize the palette.

        Args:
            colors: Document colors; entries named like a built-in replace it.
        """
        merged = dict(BUILTIN_COLORS)
        if colors:
            merged.update(colors)
        self._colors: Mapping[str, Color] = MappingProxyType(merged)

    @classmethod
    def from_document(cls, value: object) -> Palette:
        """Build a palette from the raw ``palette`` value of a theme.

        Every entry must be a literal hex code; names of other palette
        entries are not followed.

        Args:
            value: The raw ``palette`` value. Anything but a table yields the
                built-in palette.

        Returns:
            The palette.

        Raises:
            MalformedColorError: If an entry is not a hex code.
        """
        if not isinstance(value, Mapping):
            logger.debug(f"Ignoring non-table palette value of type {type(value).__name__}")
            return cls()
        return cls({name: parse_hex_color(_expect_str(color)) for name, color in value.items()})

    @property
    def colors(self) -> Mapping[str, Color]:
        return self._colors

    def __contains__(self, name: object) -> bool:
        return name in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def resolve(self, token: object) -> Color:
        """Resolve a color token.

        Palette names take precedence over hex parsing.

        Args:
            token: A palette name or ``#RRGGBB`` hex code.

        Returns:
            The resolved color.

        Raises:
            MalformedColorError: If the token is neither a known name nor a
                hex code.
        """
        token = _expect_str(token)
        color = self._colors.get(token)
        if color is not None:
            return color
        return parse_hex_color(token)
