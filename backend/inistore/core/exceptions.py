"""Exception hierarchy for inistore.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .types import FileOperation

__all__ = (
    'InistoreError',
    'InvalidOptionError',
    'OptionFileError',
    'OptionFileNotFoundError',
    'NoDefaultPathError',
    'OptionFileIOError',
)


class InistoreError(Exception):
    """Base exception for all inistore errors.

    All exceptions in the package inherit from this class, enabling
    catch-all handling at application boundaries.

    Attributes:
        context: Additional context for debugging.
    """

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        self.context = context or {}
        super().__init__(message)


# =============================================================================
# Argument Validation
# =============================================================================
class InvalidOptionError(InistoreError, ValueError):
    """Raised when an option or option name fails validation."""

    def __init__(self, message: str, *, name: Any = None) -> None:
        self.name = name
        super().__init__(message, context={'name': name})


# =============================================================================
# File Exceptions
# =============================================================================
class OptionFileError(InistoreError):
    """Base exception for ini file errors."""


class OptionFileNotFoundError(OptionFileError, FileNotFoundError):
    """Raised when the ini file cannot be found, home directory included.

    Attributes:
        path: The path as requested.
        tried: Every location that was checked.
    """

    def __init__(self, path: Path | None, *, tried: Sequence[Path] = (), message: str | None = None) -> None:
        self.path = path
        self.tried = tuple(tried)
        super().__init__(
            message or f'Ini file not found: {path}',
            context={'path': str(path) if path is not None else None, 'tried': [str(p) for p in self.tried]},
        )


class NoDefaultPathError(OptionFileNotFoundError):
    """Raised when a parameterless read or write has no default path to use."""

    def __init__(self, operation: FileOperation) -> None:
        self.operation = operation
        super().__init__(None, message=f'No default ini file set for {operation}')


class OptionFileIOError(OptionFileError, OSError):
    """Raised when reading or writing an ini file fails."""

    def __init__(self, path: Path, operation: FileOperation, message: str) -> None:
        self.path = path
        self.operation = operation
        super().__init__(
            f'Ini file {operation} failed for {path}: {message}',
            context={'path': str(path), 'operation': operation},
        )
