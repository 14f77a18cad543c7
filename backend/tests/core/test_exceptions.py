"""Tests for core exceptions.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

from pathlib import Path

from dirty_equals import IsList, IsStr

from inistore.core.exceptions import (
    InistoreError,
    InvalidOptionError,
    NoDefaultPathError,
    OptionFileIOError,
    OptionFileNotFoundError,
)

__all__ = ()


class TestInistoreError:
    """Tests for the base InistoreError."""

    def test_basic_creation(self) -> None:
        """Error should be created with message."""
        error = InistoreError("Test error")

        assert str(error) == "Test error"
        assert error.context == {}

    def test_inheritance(self) -> None:
        """Should inherit from Exception."""
        assert isinstance(InistoreError("Test"), Exception)


class TestInvalidOptionError:
    """Tests for InvalidOptionError."""

    def test_creation(self) -> None:
        error = InvalidOptionError("Option name must not be null or empty", name="")

        assert error.name == ""
        assert error.context == {"name": ""}

    def test_inheritance(self) -> None:
        """Should be both an InistoreError and a ValueError."""
        error = InvalidOptionError("bad")

        assert isinstance(error, InistoreError)
        assert isinstance(error, ValueError)


class TestOptionFileNotFoundError:
    """Tests for OptionFileNotFoundError."""

    def test_creation_with_path(self) -> None:
        """Error should include the path and every location tried."""
        error = OptionFileNotFoundError(Path("app.ini"), tried=[Path("app.ini"), Path("/home/u/app.ini")])

        assert "app.ini" in str(error)
        assert error.tried == (Path("app.ini"), Path("/home/u/app.ini"))
        assert error.context == {"path": IsStr(), "tried": IsList(length=2)}

    def test_inheritance(self) -> None:
        """Should be catchable as FileNotFoundError."""
        error = OptionFileNotFoundError(Path("app.ini"))

        assert isinstance(error, FileNotFoundError)
        assert isinstance(error, InistoreError)


class TestNoDefaultPathError:
    """Tests for NoDefaultPathError."""

    def test_creation(self) -> None:
        error = NoDefaultPathError("write")

        assert error.operation == "write"
        assert error.path is None
        assert "write" in str(error)

    def test_inheritance(self) -> None:
        assert isinstance(NoDefaultPathError("read"), OptionFileNotFoundError)


class TestOptionFileIOError:
    """Tests for OptionFileIOError."""

    def test_creation(self) -> None:
        error = OptionFileIOError(Path("app.ini"), "read", "permission denied")

        assert error.operation == "read"
        assert "permission denied" in str(error)

    def test_inheritance(self) -> None:
        """Should be an OSError but not a FileNotFoundError."""
        error = OptionFileIOError(Path("app.ini"), "write", "disk full")

        assert isinstance(error, OSError)
        assert not isinstance(error, FileNotFoundError)
