"""Shared test fixtures for scopetint."""

import os
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# Keep log files out of the home directory; must run before scopetint.logger is imported
os.environ.setdefault("SCOPETINT_LOG_DIR", tempfile.mkdtemp(prefix="scopetint-logs-"))

from loguru import logger  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration directory at a temporary directory.

    Returns:
        The configuration directory.
    """
    config_dir = tmp_path / "config"
    monkeypatch.setenv("SCOPETINT_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def theme_dirs(tmp_path: Path) -> tuple[Path, Path]:
    """Create empty user and default theme directories.

    Returns:
        Tuple of (user_dir, default_dir).
    """
    user_dir = tmp_path / "user" / "themes"
    default_dir = tmp_path / "default" / "themes"
    user_dir.mkdir(parents=True)
    default_dir.mkdir(parents=True)
    return user_dir, default_dir


@pytest.fixture
def write_theme() -> Callable[[Path, str, str], Path]:
    """Return a helper writing ``<name>.toml`` into a directory."""

    def _write(directory: Path, name: str, content: str) -> Path:
        path = directory / f"{name}.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture WARNING and higher log messages emitted during a test."""
    messages: list[str] = []

    def sink(message: object) -> None:
        messages.append(str(message).rstrip("\n"))

    sink_id = logger.add(sink, level="WARNING", format="{message}")
    yield messages
    logger.remove(sink_id)
