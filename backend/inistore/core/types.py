"""Type aliases for inistore.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import os
from typing import Literal, TypeAlias

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "OptionName",
    "OptionKey",
    "OptionValue",
    "OptionDescription",
    "PathLike",
    "FileOperation",
)

# =============================================================================
# Section 3: Type Aliases
# =============================================================================
OptionName: TypeAlias = str
"""Option name as given by the caller, trimmed but not case folded."""

OptionKey: TypeAlias = str
"""Folded option name used as the store's mapping key."""

OptionValue: TypeAlias = str | None
"""Free text option value. May be absent or empty."""

OptionDescription: TypeAlias = str | None
"""Free text description written as a comment before the option."""

PathLike: TypeAlias = str | os.PathLike[str]
"""Anything accepted as a file location."""

FileOperation: TypeAlias = Literal["read", "write"]
"""File operations that can fail with an I/O error."""
