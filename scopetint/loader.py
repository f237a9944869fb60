"""Theme loading with inheritance and cached built-in themes."""

from __future__ import annotations

import copy
import tomllib
from collections.abc import Mapping
from pathlib import Path
from threading import Lock
from typing import Any, ClassVar, Protocol

from scopetint.builder import INHERITS_KEY
from scopetint.errors import (
    DocumentNotATableError,
    InvalidAttributeError,
    ThemeError,
    ThemeInheritanceCycleError,
    ThemeNotFoundError,
    ThemeParseError,
)
from scopetint.logger import get_logger
from scopetint.merge import merge_themes
from scopetint.settings import (
    BASE16_DEFAULT_THEME_NAME,
    DEFAULT_THEME_NAME,
    RUNTIME_DIR,
    get_default_themes_dir,
    get_user_themes_dir,
    is_valid_theme_name,
)
from scopetint.theme import Theme

logger = get_logger(__name__)

THEME_FILE_SUFFIX = ".toml"


class DocumentSource(Protocol):
    """Finds the raw document of a named theme."""

    def load_document(self, name: str, *, default_only: bool = False) -> Mapping[str, Any]:
        """Return the parsed document for ``name``.

        Args:
            name: Theme name.
            default_only: Skip user overrides and only consult the shipped themes.

        Raises:
            ThemeNotFoundError: If no document exists for ``name``.
        """
        ...


def read_theme_file(path: Path) -> dict[str, Any]:
    """Read and parse a TOML theme file.

    Args:
        path: Theme file path.

    Returns:
        The parsed document.

    Raises:
        ThemeParseError: If the file cannot be read, is not UTF-8, or is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ThemeParseError(path, str(exc)) from exc
    except OSError as exc:
        raise ThemeParseError(path, exc.strerror or str(exc)) from exc


class DirectoryDocumentSource:
    """Looks up ``<name>.toml`` in a user directory, then a default directory."""

    def __init__(self, user_dir: Path, default_dir: Path) -> None:
        """Initialize the source.

        Args:
            user_dir: Directory with user themes, which take precedence.
            default_dir: Directory with the shipped themes.
        """
        self.user_dir = user_dir
        self.default_dir = default_dir

    def path_for(self, name: str, *, default_only: bool = False) -> Path | None:
        """Find the file that defines theme ``name``.

        Returns:
            The theme file path, or None if neither directory has it.
        """
        if not is_valid_theme_name(name):
            return None
        directories = (self.default_dir,) if default_only else (self.user_dir, self.default_dir)
        for directory in directories:
            path = directory / f"{name}{THEME_FILE_SUFFIX}"
            if path.is_file():
                return path
        return None

    def load_document(self, name: str, *, default_only: bool = False) -> dict[str, Any]:
        path = self.path_for(name, default_only=default_only)
        if path is None:
            raise ThemeNotFoundError(name)
        logger.debug(f"Loading theme {name!r} from {path}")
        return read_theme_file(path)


class _BuiltinThemes:
    """Process-wide cache of the built-in theme documents and themes.

    Each entry is computed at most once; afterwards it is only read.
    """

    FILES: ClassVar[dict[str, str]] = {
        DEFAULT_THEME_NAME: "default.toml",
        BASE16_DEFAULT_THEME_NAME: "base16_default.toml",
    }

    _lock: ClassVar[Lock] = Lock()
    _documents: ClassVar[dict[str, dict[str, Any]]] = {}
    _themes: ClassVar[dict[str, Theme]] = {}

    @classmethod
    def document(cls, name: str) -> dict[str, Any] | None:
        """Return a private copy of a built-in document, or None."""
        if name not in cls.FILES:
            return None
        document = cls._documents.get(name)
        if document is None:
            with cls._lock:
                document = cls._documents.get(name)
                if document is None:
                    document = read_theme_file(RUNTIME_DIR / cls.FILES[name])
                    cls._documents[name] = document
        return copy.deepcopy(document)

    @classmethod
    def theme(cls, name: str) -> Theme:
        theme = cls._themes.get(name)
        if theme is None:
            document = cls.document(name)
            if document is None:
                raise ThemeNotFoundError(name)
            with cls._lock:
                theme = cls._themes.get(name)
                if theme is None:
                    theme = Theme.from_document(document, name=name)
                    cls._themes[name] = theme
        return theme


def builtin_document(name: str) -> dict[str, Any] | None:
    """Return the document of a built-in theme, or None for other names."""
    return _BuiltinThemes.document(name)


def default_theme() -> Theme:
    """Return the cached true color default theme."""
    return _BuiltinThemes.theme(DEFAULT_THEME_NAME)


def base16_default_theme() -> Theme:
    """Return the cached 16-color default theme."""
    return _BuiltinThemes.theme(BASE16_DEFAULT_THEME_NAME)


class Loader:
    """Loads themes by name, resolving ``inherits`` chains."""

    def __init__(self, source: DocumentSource | None = None) -> None:
        """Initialize the loader.

        Args:
            source: Where theme documents come from. Defaults to the user
                theme directory backed by the shipped themes.
        """
        self.source: DocumentSource = source or DirectoryDocumentSource(
            get_user_themes_dir(), get_default_themes_dir()
        )

    def default_theme(self, true_color: bool) -> Theme:
        """Return the default theme suited to the terminal's color support."""
        return default_theme() if true_color else base16_default_theme()

    def load(self, name: str) -> Theme:
        """Load a theme and every theme it inherits from.

        Args:
            name: Theme name.

        Returns:
            The resolved theme, carrying ``name``.

        Raises:
            ThemeNotFoundError: If the theme or one of its ancestors is missing.
            ThemeParseError: If a theme file is not valid TOML.
            ThemeInheritanceCycleError: If the ``inherits`` links loop.
            DocumentNotATableError: If a document is not a table.
        """
        if name == DEFAULT_THEME_NAME:
            return default_theme()
        if name == BASE16_DEFAULT_THEME_NAME:
            return base16_default_theme()

        document = self.resolve_document(name)
        logger.info(f"Loaded theme {name!r}")
        return Theme.from_document(document, name=name)

    def load_or_default(self, name: str, true_color: bool) -> Theme:
        """Load a theme, falling back to the default theme on failure."""
        try:
            return self.load(name)
        except ThemeError as exc:
            logger.error(f"Failed to load theme {name!r}: {exc}")
            return self.default_theme(true_color)

    def resolve_document(self, name: str) -> dict[str, Any]:
        """Return the document of ``name`` merged with all its ancestors."""
        return self._load_flavor(name, base=name, default_only=False, chain=())

    def _fetch(self, name: str, *, default_only: bool) -> dict[str, Any]:
        document = self.source.load_document(name, default_only=default_only)
        if not isinstance(document, Mapping):
            raise DocumentNotATableError(document)
        return dict(document)

    def _load_flavor(
        self,
        name: str,
        *,
        base: str,
        default_only: bool,
        chain: tuple[tuple[str, bool], ...],
    ) -> dict[str, Any]:
        link = (name, default_only)
        if link in chain:
            raise ThemeInheritanceCycleError([entry for entry, _ in chain] + [name])
        chain = (*chain, link)

        document = self._fetch(name, default_only=default_only)
        if INHERITS_KEY not in document:
            return document

        parent_name = document[INHERITS_KEY]
        if not isinstance(parent_name, str):
            raise InvalidAttributeError(INHERITS_KEY, f"{name}: expected 'inherits' to be a string")

        parent = builtin_document(parent_name)
        if parent is None:
            # A theme inheriting from its own name extends the shipped copy
            parent = self._load_flavor(
                parent_name,
                base=base,
                default_only=parent_name == base,
                chain=chain,
            )
        logger.debug(f"Theme {name!r} inherits from {parent_name!r}")
        return merge_themes(parent, document)
