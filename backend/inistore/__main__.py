"""Command-line entry point for inistore.

Reads an ini file, applies ``--name=value`` overrides to the options it
defines and prints the merged result. With ``--write`` the result is saved
back to the same file.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import argparse
import sys
from typing import TYPE_CHECKING

# Local imports (core first, then alphabetical)
from . import __version__
from .core.exceptions import OptionFileError
from .core.store import OptionStore
from .infra.instrumentation import configure_instrumentation
from .infra.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("build_parser", "main")

_logger = get_logger("cli")


# =============================================================================
# Section 12: Functions
# =============================================================================
def build_parser() -> argparse.ArgumentParser:
    """Build the parser for the tool's own arguments."""
    parser = argparse.ArgumentParser(
        prog="inistore",
        description="Merge command line overrides into an ini file.",
        epilog="Any other -name=value or --name=value argument overrides that option.",
        allow_abbrev=False,
    )
    parser.add_argument("file", help="ini file to read (looked up in the home directory if missing)")
    parser.add_argument("--write", action="store_true", help="save the merged options back to the file")
    parser.add_argument("--version", action="version", version=f"inistore {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    overrides = [arg for arg in arguments if _is_override(arg)]
    args = build_parser().parse_args([arg for arg in arguments if not _is_override(arg)])
    configure_instrumentation(console=False)

    store = OptionStore()
    try:
        store.read_ini_file(args.file, option_must_pre_exist=False)
        updated = store.parse_command_line(overrides)
        _logger.info("Applied {updated} overrides", updated=updated, file=args.file)
        if args.write:
            store.write_ini_file()
    except OptionFileError as exc:
        print(f"inistore: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(store.render())
    return 0


def _is_override(arg: str) -> bool:
    return arg.strip().startswith("-") and "=" in arg


if __name__ == "__main__":
    sys.exit(main())
