"""Unit tests for style attribute parsing."""

import pytest

from scopetint.errors import (
    InvalidAttributeError,
    InvalidModifierError,
    InvalidUnderlineAttributeError,
    InvalidUnderlineStyleError,
    MalformedColorError,
)
from scopetint.graphics import AnsiColor, Modifier, RgbColor, Style, UnderlineStyle
from scopetint.palette import Palette
from scopetint.parser import apply_style, parse_modifier, parse_underline_style


@pytest.fixture
def palette() -> Palette:
    """Palette with one custom color."""
    return Palette.from_document({"my_color": "#ffffff"})


class TestApplyStyleScalar:
    """Scalar values set the foreground."""

    def test_hex_string(self, palette: Palette) -> None:
        assert apply_style(Style(), "#ffffff", palette) == Style(fg=RgbColor(255, 255, 255))

    def test_palette_name(self, palette: Palette) -> None:
        assert apply_style(Style(), "my_color", palette) == Style(fg=RgbColor(255, 255, 255))

    def test_builtin_name(self, palette: Palette) -> None:
        assert apply_style(Style(), "cyan", palette).fg is AnsiColor.CYAN

    def test_malformed_color(self, palette: Palette) -> None:
        with pytest.raises(MalformedColorError):
            apply_style(Style(), "nope", palette)


class TestApplyStyleTable:
    """Table values set individual attributes."""

    def test_fg_bg_and_modifiers(self, palette: Palette) -> None:
        style = apply_style(Style(), {"fg": "#ffffff", "bg": "#000000", "modifiers": ["bold"]}, palette)
        assert style == Style(fg=RgbColor(255, 255, 255), bg=RgbColor(0, 0, 0)).with_modifier(Modifier.BOLD)

    def test_multiple_modifiers(self, palette: Palette) -> None:
        style = apply_style(Style(), {"modifiers": ["italic", "dim", "reversed"]}, palette)
        assert style.add_modifier == Modifier.ITALIC | Modifier.DIM | Modifier.REVERSED

    def test_underlined_modifier_sets_line_underline(self, palette: Palette) -> None:
        style = apply_style(Style(), {"modifiers": ["underlined"]}, palette)
        assert style.underline_style is UnderlineStyle.LINE
        assert not style.add_modifier

    def test_underline_table(self, palette: Palette) -> None:
        style = apply_style(Style(), {"underline": {"color": "red", "style": "curl"}}, palette)
        assert style.underline_color is AnsiColor.RED
        assert style.underline_style is UnderlineStyle.CURL

    def test_underline_composes_onto_existing_style(self, palette: Palette) -> None:
        base = Style(fg=AnsiColor.BLUE, underline_style=UnderlineStyle.DOTTED)
        style = apply_style(base, {"underline": {"color": "red"}}, palette)
        assert style.fg is AnsiColor.BLUE
        assert style.underline_style is UnderlineStyle.DOTTED
        assert style.underline_color is AnsiColor.RED

    def test_empty_table_is_empty_style(self, palette: Palette) -> None:
        assert apply_style(Style(), {}, palette) == Style()

    def test_unknown_attribute(self, palette: Palette) -> None:
        with pytest.raises(InvalidAttributeError) as exc_info:
            apply_style(Style(), {"fg": "red", "italic": True}, palette)
        assert exc_info.value.key == "italic"
        assert exc_info.value.partial == Style(fg=AnsiColor.RED)

    def test_unknown_underline_attribute(self, palette: Palette) -> None:
        with pytest.raises(InvalidUnderlineAttributeError) as exc_info:
            apply_style(Style(), {"underline": {"color": "red", "thickness": 2}}, palette)
        assert exc_info.value.key == "thickness"
        assert exc_info.value.partial == Style(underline_color=AnsiColor.RED)

    def test_underline_must_be_table(self, palette: Palette) -> None:
        with pytest.raises(InvalidAttributeError, match="underline"):
            apply_style(Style(), {"underline": "curl"}, palette)

    def test_invalid_underline_style(self, palette: Palette) -> None:
        with pytest.raises(InvalidUnderlineStyleError):
            apply_style(Style(), {"underline": {"style": "wavy"}}, palette)

    def test_invalid_modifier_keeps_earlier_modifiers(self, palette: Palette) -> None:
        with pytest.raises(InvalidModifierError) as exc_info:
            apply_style(Style(), {"fg": "red", "modifiers": ["bold", "sparkly"]}, palette)
        assert exc_info.value.token == "sparkly"
        assert exc_info.value.partial == Style(fg=AnsiColor.RED).with_modifier(Modifier.BOLD)

    def test_modifiers_must_be_array(self, palette: Palette) -> None:
        with pytest.raises(InvalidAttributeError, match="modifiers"):
            apply_style(Style(), {"modifiers": "bold"}, palette)

    def test_failure_after_fg_reports_partial(self, palette: Palette) -> None:
        with pytest.raises(MalformedColorError) as exc_info:
            apply_style(Style(), {"fg": "red", "bg": "not_a_color"}, palette)
        assert exc_info.value.partial == Style(fg=AnsiColor.RED)


class TestTokenParsers:
    """Tests for the standalone token parsers."""

    def test_parse_modifier(self) -> None:
        assert parse_modifier("hidden") is Modifier.HIDDEN

    def test_parse_modifier_rejects_non_string(self) -> None:
        with pytest.raises(InvalidModifierError):
            parse_modifier(1)

    def test_parse_underline_style(self) -> None:
        assert parse_underline_style("dashed") is UnderlineStyle.DASHED
