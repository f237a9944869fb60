"""Theme resolution: palettes, inheritance and scope lookups."""

from scopetint.errors import (
    DocumentNotATableError,
    InvalidAttributeError,
    InvalidModifierError,
    InvalidUnderlineAttributeError,
    InvalidUnderlineStyleError,
    MalformedColorError,
    ThemeError,
    ThemeInheritanceCycleError,
    ThemeNotFoundError,
    ThemeParseError,
    ThemeValueError,
)
from scopetint.graphics import AnsiColor, Color, IndexedColor, Modifier, RgbColor, Style, UnderlineStyle
from scopetint.loader import DirectoryDocumentSource, DocumentSource, Loader, base16_default_theme, default_theme
from scopetint.merge import merge_documents, merge_themes
from scopetint.palette import Palette
from scopetint.theme import Theme

__all__ = [
    "AnsiColor",
    "Color",
    "DirectoryDocumentSource",
    "DocumentNotATableError",
    "DocumentSource",
    "IndexedColor",
    "InvalidAttributeError",
    "InvalidModifierError",
    "InvalidUnderlineAttributeError",
    "InvalidUnderlineStyleError",
    "Loader",
    "MalformedColorError",
    "Modifier",
    "Palette",
    "RgbColor",
    "Style",
    "Theme",
    "ThemeError",
    "ThemeInheritanceCycleError",
    "ThemeNotFoundError",
    "ThemeParseError",
    "ThemeValueError",
    "UnderlineStyle",
    "base16_default_theme",
    "default_theme",
    "merge_documents",
    "merge_themes",
]
