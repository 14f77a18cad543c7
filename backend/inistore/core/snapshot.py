"""Serializable snapshots of an option store.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Third-party (alphabetical)
from pydantic import BaseModel, ConfigDict, Field

# Local imports (core first, then alphabetical)
from .option import Option

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("StoreSnapshot",)


# =============================================================================
# Section 11: Classes
# =============================================================================
class StoreSnapshot(BaseModel):
    """Point-in-time copy of a store's options and default path.

    Options keep their insertion order. A snapshot is detached from the store
    it was taken from and round-trips through JSON.
    """

    model_config = ConfigDict(frozen=True)

    options: tuple[Option, ...] = Field(default=(), description="Options in insertion order")
    default_path: str | None = Field(default=None, description="Remembered ini file location")
