"""inistore package initialization.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from ._version import __version__
from .core.exceptions import (
    InistoreError,
    InvalidOptionError,
    NoDefaultPathError,
    OptionFileIOError,
    OptionFileNotFoundError,
)
from .core.option import Option
from .core.settings import InistoreSettings, load_settings
from .core.snapshot import StoreSnapshot
from .core.store import OptionStore

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "__version__",
    "Option",
    "OptionStore",
    "StoreSnapshot",
    "InistoreSettings",
    "load_settings",
    "InistoreError",
    "InvalidOptionError",
    "NoDefaultPathError",
    "OptionFileIOError",
    "OptionFileNotFoundError",
)
