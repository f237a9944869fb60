"""Exceptions raised while parsing and loading themes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scopetint.graphics import Style


class ThemeError(Exception):
    """Base class for all theme errors."""


class ThemeValueError(ThemeError):
    """Base class for malformed values inside a theme document.

    Attributes:
        partial: The style assembled before the failing attribute, when the
            error escaped from style parsing.
    """

    partial: Style | None = None


class MalformedColorError(ThemeValueError):
    """Raised when a color token is neither a palette name nor a hex code."""

    def __init__(self, token: object, message: str | None = None) -> None:
        self.token = token
        super().__init__(message or f"Theme: malformed hexcode: {token}")


class UnrecognizedValueError(MalformedColorError):
    """Raised when a color value is not a string at all."""

    def __init__(self, token: object) -> None:
        super().__init__(token, f"Theme: unrecognized value: {token!r}")


class InvalidAttributeError(ThemeValueError):
    """Raised for an unknown or badly typed style attribute."""

    def __init__(self, key: str, detail: str | None = None) -> None:
        self.key = key
        message = f"Theme: invalid style attribute: {key}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InvalidUnderlineAttributeError(ThemeValueError):
    """Raised for an unknown key inside an ``underline`` table."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Theme: invalid underline attribute: {key}")


class InvalidUnderlineStyleError(ThemeValueError):
    """Raised for an unknown underline style name."""

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(f"Theme: invalid underline style: {token}")


class InvalidModifierError(ThemeValueError):
    """Raised for an unknown modifier name."""

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(f"Theme: invalid modifier: {token}")


class DocumentNotATableError(ThemeError):
    """Raised when a theme document's top level is not a table."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Expected theme document to be a table, found {type(value).__name__}")


class ThemeNotFoundError(ThemeError):
    """Raised when no document exists for a theme name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Theme {name!r} was not found")


class ThemeParseError(ThemeError):
    """Raised when a theme file cannot be read or is not valid TOML."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse theme file {path}: {reason}")


class ThemeInheritanceCycleError(ThemeError):
    """Raised when ``inherits`` links form a loop."""

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__(f"Theme inheritance cycle: {' -> '.join(self.chain)}")
