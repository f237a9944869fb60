"""Resolved, immutable themes."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from scopetint.builder import ScopeTable, build_scope_table
from scopetint.errors import DocumentNotATableError
from scopetint.graphics import Style


def scope_prefixes(scope: str) -> Iterator[str]:
    """Yield ``scope`` and then each shorter dot-separated prefix.

    ``"ui.text.focus"`` yields ``"ui.text.focus"``, ``"ui.text"``, ``"ui"``.
    """
    while True:
        yield scope
        scope, dot, _ = scope.rpartition(".")
        if not dot:
            return


class Theme:
    """Styles for every scope defined by a theme.

    Styles are stored both by name, for UI lookups, and as a list in document
    order, for highlighters that resolve a scope to an index once and then
    look styles up by index.
    """

    __slots__ = ("_highlights", "_name", "_scopes", "_styles")

    def __init__(self, name: str, table: ScopeTable) -> None:
        """Initialize the theme.

        Args:
            name: Theme name.
            table: Scope tables produced by build_scope_table.

        Raises:
            ValueError: If ``table.scopes`` and ``table.highlights`` differ in length.
        """
        if len(table.scopes) != len(table.highlights):
            msg = f"{len(table.scopes)} scopes but {len(table.highlights)} highlights"
            raise ValueError(msg)
        self._name = name
        self._styles: Mapping[str, Style] = MappingProxyType(dict(table.styles))
        self._scopes = tuple(table.scopes)
        self._highlights = tuple(table.highlights)

    @classmethod
    def from_document(cls, document: object, name: str = "") -> Theme:
        """Build a theme from a merged theme document.

        Args:
            document: The merged document.
            name: Name of the resulting theme.

        Returns:
            The theme.

        Raises:
            DocumentNotATableError: If the document is not a table.
        """
        if not isinstance(document, Mapping):
            raise DocumentNotATableError(document)
        return cls(name, build_scope_table(document))

    def with_name(self, name: str) -> Theme:
        """Return the same theme under a different name."""
        return Theme(name, ScopeTable(self._styles, self._scopes, self._highlights))

    @property
    def name(self) -> str:
        return self._name

    @property
    def scopes(self) -> tuple[str, ...]:
        return self._scopes

    @property
    def styles(self) -> Mapping[str, Style]:
        return self._styles

    def highlight(self, index: int) -> Style:
        """Return the style of the scope at ``index`` in ``scopes``.

        Raises:
            IndexError: If ``index`` did not come from ``find_scope_index``.
        """
        if index < 0:
            raise IndexError(f"highlight index out of range: {index}")
        return self._highlights[index]

    def find_scope_index(self, scope: str) -> int | None:
        """Return the position of ``scope`` in ``scopes``, if defined."""
        try:
            return self._scopes.index(scope)
        except ValueError:
            return None

    def try_get_exact(self, scope: str) -> Style | None:
        """Get the style of exactly ``scope``, without broader fallbacks."""
        return self._styles.get(scope)

    def try_get(self, scope: str) -> Style | None:
        """Get the style of a scope, falling back to broader scopes.

        If ``ui.text.focus`` is not defined, ``ui.text`` and then ``ui`` are
        tried.

        Args:
            scope: Dotted scope name.

        Returns:
            The first style found, or None.
        """
        for prefix in scope_prefixes(scope):
            style = self._styles.get(prefix)
            if style is not None:
                return style
        return None

    def get(self, scope: str) -> Style:
        """Like try_get, but returns an empty style when nothing matches."""
        style = self.try_get(scope)
        return style if style is not None else Style()

    lookup = try_get_exact
    lookup_with_fallback = try_get

    def is_16_color(self) -> bool:
        """Check that no style uses a true color foreground or background."""
        return not any(style.uses_rgb() for style in self._styles.values())

    def __repr__(self) -> str:
        return f"Theme(name={self._name!r}, scopes={len(self._scopes)})"
