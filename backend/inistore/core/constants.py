"""Module-level constants for inistore.

All constants are declared with Final type annotation for immutability
and IDE support.
"""
from __future__ import annotations

from typing import Final

# =============================================================================
# Section 1: Module Exports
# =============================================================================
__all__ = [
    # File format
    'COMMENT_PREFIX',
    'SEPARATOR',
    'ASSIGNMENT',
    # Command line
    'LONG_FLAG_PREFIX',
    'SHORT_FLAG_PREFIX',
    # Coercion
    'TRUE_VALUES',
    # Defaults
    'DEFAULT_ENCODING',
    'ENV_PREFIX',
]

# =============================================================================
# Section 2: File Format Constants
# =============================================================================
COMMENT_PREFIX: Final[str] = '#'
SEPARATOR: Final[str] = '='
# Separator as written out, e.g. ``name = value``
ASSIGNMENT: Final[str] = ' = '

# =============================================================================
# Section 3: Command Line Constants
# =============================================================================
LONG_FLAG_PREFIX: Final[str] = '--'
SHORT_FLAG_PREFIX: Final[str] = '-'

# =============================================================================
# Section 4: Coercion Constants (immutable)
# =============================================================================
# Matched verbatim, no case folding or trimming.
TRUE_VALUES: Final[frozenset[str]] = frozenset({
    'ja',
    'sí',
    'yes',
    'oui',
    'wahr',
    'verdadero',
    'true',
    'vrai',
    '1',
})

# =============================================================================
# Section 5: Defaults
# =============================================================================
DEFAULT_ENCODING: Final[str] = 'utf-8'
ENV_PREFIX: Final[str] = 'INISTORE_'
