"""Entry point for scopetint: print the styles a theme resolves to."""

import argparse
import sys
import traceback
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from scopetint.colors import to_rich_style
from scopetint.errors import ThemeError
from scopetint.graphics import Color, IndexedColor, RgbColor, Style
from scopetint.loader import DirectoryDocumentSource, Loader
from scopetint.logger import add_stderr_sink, get_logger, remove_sink
from scopetint.settings import (
    LOG_LEVELS,
    Settings,
    get_default_themes_dir,
    get_user_themes_dir,
    load_settings,
)
from scopetint.theme import Theme

logger = get_logger(__name__)


def get_version() -> str:
    """Get the installed scopetint version.

    Returns:
        The version string, or "unknown" if it cannot be determined.
    """
    try:
        return version("scopetint")
    except PackageNotFoundError:
        return "unknown"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse, defaulting to sys.argv.

    Returns:
        The parsed arguments.
    """
    parser = argparse.ArgumentParser(prog="scopetint", description="Resolve and preview a theme.")
    parser.add_argument("theme", nargs="?", help="theme name (defaults to the configured theme)")
    parser.add_argument("--scope", help="print the resolved style of a single scope")
    parser.add_argument("--themes-dir", type=Path, help="directory with user theme files")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="console log level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser.parse_args(argv)


def _describe_color(color: Color | None) -> str:
    if color is None:
        return ""
    if isinstance(color, RgbColor):
        return color.hex
    if isinstance(color, IndexedColor):
        return f"color({color.index})"
    return color.value


def _describe_modifiers(style: Style) -> str:
    names = [modifier.name.lower() for modifier in style.add_modifier if modifier.name]
    if style.underline_style is not None:
        names.append(f"underline={style.underline_style.value}")
    return " ".join(names)


def render_theme(theme: Theme) -> Table:
    """Build a Rich table listing every scope of a theme."""
    table = Table(title=f"{theme.name} ({'16 colors' if theme.is_16_color() else 'true color'})")
    table.add_column("Scope")
    table.add_column("Foreground")
    table.add_column("Background")
    table.add_column("Modifiers")
    for scope in theme.scopes:
        style = theme.get(scope)
        table.add_row(
            Text(scope, style=to_rich_style(style)),
            _describe_color(style.fg),
            _describe_color(style.bg),
            _describe_modifiers(style),
        )
    return table


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface.

    Returns:
        Process exit code.
    """
    args = parse_args(argv)
    settings = load_settings()
    sink_id = add_stderr_sink(args.log_level or settings.log_level)
    try:
        return _preview(args, settings)
    finally:
        remove_sink(sink_id)


def _preview(args: argparse.Namespace, settings: Settings) -> int:
    loader = Loader(DirectoryDocumentSource(args.themes_dir or get_user_themes_dir(), get_default_themes_dir()))
    if args.theme is None:
        # The configured theme may have been removed since it was chosen
        theme = loader.load_or_default(settings.theme, settings.resolve_true_color())
    else:
        try:
            theme = loader.load(args.theme)
        except ThemeError as exc:
            logger.error(f"Failed to load theme {args.theme!r}: {exc}")
            return 1

    console = Console()
    if args.scope:
        style = theme.try_get(args.scope)
        if style is None:
            console.print(f"{args.scope}: not defined by {theme.name}")
        else:
            console.print(Text(args.scope, style=to_rich_style(style)), _describe_color(style.fg))
        return 0

    console.print(render_theme(theme))
    return 0


def run() -> None:
    """Run the CLI with standard Python tracebacks."""
    try:
        sys.exit(main())
    except Exception:
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    run()
