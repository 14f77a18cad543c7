"""Core option model and store for inistore.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from .constants import TRUE_VALUES
from .exceptions import (
    InistoreError,
    InvalidOptionError,
    NoDefaultPathError,
    OptionFileError,
    OptionFileIOError,
    OptionFileNotFoundError,
)
from .option import Option, fold_name
from .settings import InistoreSettings, load_settings
from .snapshot import StoreSnapshot
from .store import OptionStore

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "TRUE_VALUES",
    "InistoreError",
    "InvalidOptionError",
    "NoDefaultPathError",
    "OptionFileError",
    "OptionFileIOError",
    "OptionFileNotFoundError",
    "Option",
    "fold_name",
    "InistoreSettings",
    "load_settings",
    "StoreSnapshot",
    "OptionStore",
)
