"""Shared test fixtures and helpers for inistore tests.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import logfire
import pytest

from inistore import InistoreSettings, OptionStore

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

__all__ = ("TestEnv",)

WINDOW_INI = "# window width\nwdw_xsize = 800\n"


class TestEnv:
    """Helper for managing environment variables in tests."""

    __test__ = False  # Prevent pytest from collecting this class

    def __init__(self) -> None:
        self.envars: dict[str, str | None] = {}

    def set(self, name: str, value: str) -> None:
        """Set an environment variable, saving the original value."""
        self.envars[name] = os.getenv(name)
        os.environ[name] = value

    def remove(self, name: str) -> None:
        """Remove an environment variable, saving the original value."""
        self.envars[name] = os.environ.pop(name, None)

    def reset(self) -> None:
        """Reset all modified environment variables to original values."""
        for name, value in self.envars.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value


@pytest.fixture(scope="session", autouse=True)
def _quiet_logfire() -> None:
    """Keep logfire local and silent for the test session."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def env() -> Iterator[TestEnv]:
    """Fixture for managing environment variables in tests."""
    test_env = TestEnv()
    yield test_env
    test_env.reset()


@pytest.fixture
def settings() -> InistoreSettings:
    """Settings independent of the surrounding environment."""
    return InistoreSettings(encoding="utf-8", home_fallback=True, default_path=None)


@pytest.fixture
def store(settings: InistoreSettings) -> OptionStore:
    """An empty option store."""
    return OptionStore(settings=settings)


@pytest.fixture
def window_ini(tmp_path: Path) -> Path:
    """An ini file holding one described option."""
    path = tmp_path / "window.ini"
    path.write_text(WINDOW_INI, encoding="utf-8")
    return path


@pytest.fixture
def write_ini(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing ini text to a file under ``tmp_path``."""

    def _write(text: str, name: str = "options.ini") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
