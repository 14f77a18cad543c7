"""Version information for the inistore package.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from typing import Final

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("__version__",)

# =============================================================================
# Section 3: Constants
# =============================================================================
__version__: Final[str] = "0.1.0"
