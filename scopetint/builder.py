"""Turn a merged theme document into scope lookup tables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from scopetint.errors import ThemeValueError
from scopetint.graphics import Style
from scopetint.logger import get_logger
from scopetint.palette import Palette
from scopetint.parser import apply_style

logger = get_logger(__name__)

PALETTE_KEY = "palette"
INHERITS_KEY = "inherits"


@dataclass(frozen=True)
class ScopeTable:
    """Styles keyed by scope, plus the same entries in document order.

    ``styles[scopes[i]] == highlights[i]`` holds for every index.
    """

    styles: Mapping[str, Style]
    scopes: tuple[str, ...]
    highlights: tuple[Style, ...]


def _load_palette(value: object) -> Palette:
    try:
        return Palette.from_document(value)
    except ThemeValueError as exc:
        logger.warning(f"{exc}; falling back to the built-in palette")
        return Palette()


def build_scope_table(document: Mapping[str, object]) -> ScopeTable:
    """Parse every scope entry of a theme document.

    Malformed entries are logged and keep whatever attributes parsed before
    the failure. A malformed palette is logged and replaced by the built-in
    colors. The document itself is left untouched.

    Args:
        document: A fully merged theme document.

    Returns:
        The scope tables for the theme.
    """
    values = dict(document)
    palette = _load_palette(values.pop(PALETTE_KEY)) if PALETTE_KEY in values else Palette()
    # Inheritance is resolved by the loader before we get here
    values.pop(INHERITS_KEY, None)

    styles: dict[str, Style] = {}
    scopes: list[str] = []
    highlights: list[Style] = []
    for name, value in values.items():
        try:
            style = apply_style(Style(), value, palette)
        except ThemeValueError as exc:
            logger.warning(f"{exc} (scope {name!r})")
            style = exc.partial if exc.partial is not None else Style()

        styles[name] = style
        scopes.append(name)
        highlights.append(style)

    return ScopeTable(styles=styles, scopes=tuple(scopes), highlights=tuple(highlights))
