"""Settings for inistore, loaded from the environment.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import codecs
from pathlib import Path

# Third-party (alphabetical)
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Local imports (core first, then alphabetical)
from .constants import DEFAULT_ENCODING, ENV_PREFIX

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("InistoreSettings", "load_settings")


# =============================================================================
# Section 11: Classes
# =============================================================================
class InistoreSettings(BaseSettings):
    """Runtime settings shared by every option store.

    Attributes:
        encoding: Text encoding used to read and write ini files.
        home_fallback: Retry a missing relative path under the home directory.
        default_path: Initial default file of a newly created store.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        extra="ignore",
        validate_default=True,
    )

    encoding: str = DEFAULT_ENCODING
    home_fallback: bool = True
    default_path: Path | None = None

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {value}") from exc
        return value


# =============================================================================
# Section 12: Functions
# =============================================================================
def load_settings() -> InistoreSettings:
    """Load settings from the environment."""
    return InistoreSettings()
