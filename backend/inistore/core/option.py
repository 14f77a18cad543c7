"""The Option model: a named value with an optional description.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Third-party (alphabetical)
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Local imports (core first, then alphabetical)
from .exceptions import InvalidOptionError
from .types import OptionDescription, OptionKey, OptionName, OptionValue

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("Option", "fold_name")


# =============================================================================
# Section 11: Classes
# =============================================================================
class Option(BaseModel):
    """A configuration option holding a value and a description.

    The name is trimmed on construction and cannot change afterwards. The
    value and the description are free text and may be ``None`` or empty;
    when the option is written to a file the description becomes the comment
    line preceding it.

    Example:
        >>> option = Option("wdw_xsize", "800", "window width")
        >>> option.value = "1024"
    """

    model_config = ConfigDict(validate_assignment=True)

    name: OptionName = Field(frozen=True)
    value: OptionValue = None
    description: OptionDescription = None

    def __init__(
        self,
        name: OptionName,
        value: OptionValue = None,
        description: OptionDescription = None,
    ) -> None:
        if name is None or not isinstance(name, str) or not name.strip():
            raise InvalidOptionError("Option name must not be null or empty", name=name)
        super().__init__(name=name, value=value, description=description)

    @field_validator("name")
    @classmethod
    def _trim_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Option name must not be blank")
        return value

    @property
    def key(self) -> OptionKey:
        """The folded name under which a store keeps this option."""
        return fold_name(self.name)


# =============================================================================
# Section 12: Functions
# =============================================================================
def fold_name(name: str) -> OptionKey:
    """Return the case-insensitive lookup key for an option name."""
    return name.strip().lower()
