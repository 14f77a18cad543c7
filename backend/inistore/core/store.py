"""The option store and its ini file reader and writer.

An :class:`OptionStore` holds every option a program may have, keyed by
folded (trimmed, lower-cased) name and kept in insertion order. Options may be
registered up front with their defaults and descriptions, then merged from an
ini file of ``name = value`` lines and overlaid with ``--name=value`` command
line arguments.

A comment line (``# ...``) immediately preceding an option line becomes that
option's description. "Immediately" means no other line, not even a blank
one, sits between them.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import re
from pathlib import Path
from typing import TYPE_CHECKING, Final, Self

# Local imports (core first, then alphabetical)
from ..infra.logging import get_logger
from .constants import ASSIGNMENT, COMMENT_PREFIX, LONG_FLAG_PREFIX, SEPARATOR, SHORT_FLAG_PREFIX, TRUE_VALUES
from .exceptions import InvalidOptionError, NoDefaultPathError, OptionFileIOError, OptionFileNotFoundError
from .option import Option, fold_name
from .settings import InistoreSettings, load_settings
from .snapshot import StoreSnapshot

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .types import FileOperation, OptionDescription, OptionName, OptionValue, PathLike

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("OptionStore",)

# =============================================================================
# Section 3: Constants
# =============================================================================
_INT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

_logger = get_logger("store")


# =============================================================================
# Section 11: Classes
# =============================================================================
class OptionStore:
    """Ordered, case-insensitive collection of options backed by an ini file.

    Registration is strict: :meth:`add_option` and :meth:`add` raise
    :class:`InvalidOptionError` on a bad name or option. Everything that
    mutates by name (:meth:`change_option`, the setters, file reads and the
    command line overlay) is a silent no-op for unknown names.

    Args:
        options: Options to register, in order.
        default_path: File used by parameterless reads and writes.
        settings: Runtime settings; loaded from the environment if omitted.
    """

    def __init__(
        self,
        options: Iterable[Option] = (),
        *,
        default_path: PathLike | None = None,
        settings: InistoreSettings | None = None,
    ) -> None:
        self._settings = settings or load_settings()
        self._entries: dict[str, Option] = {}
        self._default_path: Path | None = None
        self.default_path = default_path if default_path is not None else self._settings.default_path
        for option in options:
            self.add(option)

    @classmethod
    def with_option(
        cls,
        name: OptionName,
        value: OptionValue = None,
        description: OptionDescription = None,
    ) -> Self:
        """Create a store holding a single option."""
        store = cls()
        store.add_option(name, value, description)
        return store

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.check_option_exists(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(options={len(self)}, default_path={self._default_path!r})"

    def options(self) -> list[Option]:
        """Return the options in insertion order."""
        return list(self._entries.values())

    @property
    def settings(self) -> InistoreSettings:
        return self._settings

    @property
    def default_path(self) -> Path | None:
        """File used by parameterless reads and writes, if any."""
        return self._default_path

    @default_path.setter
    def default_path(self, path: PathLike | None) -> None:
        if path is None or str(path) == "":
            self._default_path = None
        else:
            self._default_path = Path(path)

    # -------------------------------------------------------------------------
    # Registration and mutation
    # -------------------------------------------------------------------------
    def add_option(
        self,
        name: OptionName,
        value: OptionValue = None,
        description: OptionDescription = None,
    ) -> Option:
        """Create an option and add it, replacing any option of the same name.

        Raises:
            InvalidOptionError: If the name is ``None`` or empty.
        """
        option = Option(name, value, description)
        self._entries[option.key] = option
        return option

    def add(self, option: Option) -> None:
        """Add an option, replacing any option of the same name.

        Raises:
            InvalidOptionError: If ``option`` is ``None`` or not an Option.
        """
        if not isinstance(option, Option):
            raise InvalidOptionError("Option must not be null", name=None)
        self._entries[option.key] = option

    def change_option(self, option: Option | None) -> None:
        """Replace an existing option; options not yet in the store are ignored."""
        if option is not None and self.check_option_exists(option.name):
            self.add(option)

    def set_option_value(self, name: OptionName, value: OptionValue) -> None:
        """Set the value of an existing option. Unknown names are ignored."""
        option = self.get_option(name)
        if option is not None:
            option.value = value

    def set_option_description(self, name: OptionName, description: OptionDescription) -> None:
        """Set the description of an existing option. Unknown names are ignored."""
        option = self.get_option(name)
        if option is not None:
            option.description = description

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------
    def get_option(self, name: OptionName | None) -> Option | None:
        """Return the option with this name, compared case-insensitively."""
        if not name:
            return None
        return self._entries.get(fold_name(name))

    def check_option_exists(self, name: OptionName | None) -> bool:
        return self.get_option(name) is not None

    def get_option_value(self, name: OptionName) -> OptionValue:
        option = self.get_option(name)
        return None if option is None else option.value

    def get_trimmed_option_value(self, name: OptionName) -> OptionValue:
        value = self.get_option_value(name)
        return None if value is None else value.strip()

    def get_lower_cased_option_value(self, name: OptionName) -> OptionValue:
        value = self.get_trimmed_option_value(name)
        return None if value is None else value.lower()

    def get_option_as_int(self, name: OptionName, default_value: int) -> int:
        """Return the option value as a base-10 int, or ``default_value``.

        The default is returned when the option is missing or its trimmed value
        is not an optionally signed run of ASCII digits.
        """
        value = self.get_trimmed_option_value(name)
        if value is None or _INT_PATTERN.fullmatch(value) is None:
            return default_value
        return int(value)

    def get_true_or_false(self, name: OptionName) -> bool:
        """Return whether the raw option value is one of the truth literals.

        The literals are ``ja``, ``sí``, ``yes``, ``oui``, ``wahr``,
        ``verdadero``, ``true``, ``vrai`` and ``1``, matched exactly: ``Yes``
        or `` yes`` are false.
        """
        value = self.get_option_value(name)
        return value is not None and value in TRUE_VALUES

    # -------------------------------------------------------------------------
    # Ini file reading
    # -------------------------------------------------------------------------
    def read_ini_file(self, path: PathLike | None = None, option_must_pre_exist: bool = True) -> int:
        """Merge an ini file into the store.

        A missing relative path is retried under the user's home directory.
        The resolved absolute path becomes the store's default path.

        Args:
            path: File to read; the default path if omitted.
            option_must_pre_exist: Ignore names not already in the store
                instead of adding them.

        Returns:
            Number of options created or updated.

        Raises:
            NoDefaultPathError: If ``path`` is omitted and no default is set.
            OptionFileNotFoundError: If the file cannot be found.
            OptionFileIOError: If the file cannot be read.
        """
        resolved = self._resolve_read_path(self._require_path(path, "read"))
        self._default_path = resolved
        with _logger.span("ini.read {path}", path=str(resolved), option_must_pre_exist=option_must_pre_exist):
            try:
                with resolved.open("r", encoding=self._settings.encoding) as handle:
                    merged = self._merge_lines(handle, option_must_pre_exist)
            except (OSError, LookupError, UnicodeDecodeError) as exc:
                raise OptionFileIOError(resolved, "read", str(exc)) from exc
            _logger.debug("Merged {merged} options from {path}", merged=merged, path=str(resolved))
            return merged

    def _resolve_read_path(self, path: Path) -> Path:
        tried = [path]
        if path.exists():
            return path.absolute()
        if self._settings.home_fallback and not path.is_absolute():
            home_path = Path.home() / path
            tried.append(home_path)
            if home_path.exists():
                return home_path.absolute()
        raise OptionFileNotFoundError(path, tried=tried)

    def _merge_lines(self, lines: Iterable[str], option_must_pre_exist: bool) -> int:
        merged = 0
        pending_description: str | None = None
        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.replace("\t", " ").strip()
            if not line:
                pending_description = None
                continue
            if line.startswith(COMMENT_PREFIX):
                pending_description = line[len(COMMENT_PREFIX) :].strip()
                continue

            parts = line.split(SEPARATOR, 1)
            if len(parts) != 2 or SEPARATOR in parts[1] or not parts[0].strip():
                _logger.debug("Skipping malformed line {line_number}", line_number=line_number, line=line)
                pending_description = None
                continue

            name, value = parts[0], parts[1].strip()
            option = self.get_option(name)
            if option is not None:
                option.value = value
                if pending_description is not None:
                    option.description = pending_description
                merged += 1
            elif not option_must_pre_exist:
                self.add_option(name, value, pending_description)
                merged += 1
            pending_description = None
        return merged

    # -------------------------------------------------------------------------
    # Ini file writing
    # -------------------------------------------------------------------------
    def render(self) -> str:
        """Return the ini file text for the current options."""
        lines: list[str] = []
        for option in self:
            description = _single_line(option.description)
            # absent description renders as a bare comment marker
            lines.append(f"{COMMENT_PREFIX} {description}" if description else COMMENT_PREFIX)
            lines.append(f"{option.name}{ASSIGNMENT}{_single_line(option.value)}")
            lines.append("")
        return "".join(f"{line}\n" for line in lines)

    def write_ini_file(self, path: PathLike | None = None) -> None:
        """Write all options to an ini file, overwriting it.

        Each option is written as its description comment, its
        ``name = value`` line and a blank line. Line breaks inside a
        description or value are written as spaces. An existing file is left
        untouched when the write fails.

        Raises:
            NoDefaultPathError: If ``path`` is omitted and no default is set.
            OptionFileIOError: If the file cannot be written.
        """
        target = self._require_path(path, "write")
        encoding = self._settings.encoding
        with _logger.span("ini.write {path}", path=str(target), options=len(self)):
            text = self.render()
            try:
                text.encode(encoding)
            except (LookupError, UnicodeEncodeError) as exc:
                raise OptionFileIOError(target, "write", str(exc)) from exc

            # the target is only replaced once the new content is fully on disk
            staging = target.with_name(f".{target.name}.tmp")
            try:
                with staging.open("w", encoding=encoding) as handle:
                    handle.write(text)
                staging.replace(target)
            except OSError as exc:
                staging.unlink(missing_ok=True)
                raise OptionFileIOError(target, "write", str(exc)) from exc

    def write_ini_file_no_error(self) -> bool:
        """Write to the default path, ignoring every failure.

        Returns:
            True if the file was written.
        """
        try:
            self.write_ini_file()
        except OSError as exc:
            _logger.warning("Ini file not written: {error}", error=str(exc))
            return False
        return True

    def _require_path(self, path: PathLike | None, operation: FileOperation) -> Path:
        if path is None or str(path) == "":
            if self._default_path is None:
                raise NoDefaultPathError(operation)
            return self._default_path.expanduser()
        return Path(path).expanduser()

    # -------------------------------------------------------------------------
    # Command line overlay
    # -------------------------------------------------------------------------
    def parse_command_line(self, args: Iterable[str]) -> int:
        """Apply ``-name=value`` / ``--name=value`` arguments to existing options.

        Arguments not starting with ``-`` or without ``=`` are skipped, as are
        names not already in the store. The value is taken verbatim.

        Returns:
            Number of options updated.
        """
        updated = 0
        for arg in args:
            arg = arg.strip()
            if not arg.startswith(SHORT_FLAG_PREFIX):
                continue
            if arg.startswith(LONG_FLAG_PREFIX):
                arg = arg[len(LONG_FLAG_PREFIX) :]
            else:
                arg = arg[len(SHORT_FLAG_PREFIX) :]
            parts = arg.split(SEPARATOR, 1)
            if len(parts) != 2:
                continue
            option = self.get_option(parts[0])
            if option is None:
                _logger.debug("Ignoring unknown command line option {name}", name=parts[0])
                continue
            option.value = parts[1]
            updated += 1
        return updated

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------
    def snapshot(self) -> StoreSnapshot:
        """Return a detached copy of the options and the default path."""
        return StoreSnapshot(
            options=tuple(option.model_copy() for option in self),
            default_path=str(self._default_path) if self._default_path is not None else None,
        )

    @classmethod
    def from_snapshot(cls, snapshot: StoreSnapshot, *, settings: InistoreSettings | None = None) -> Self:
        """Rebuild a store from a snapshot."""
        return cls(
            (option.model_copy() for option in snapshot.options),
            default_path=snapshot.default_path,
            settings=settings,
        )


# =============================================================================
# Section 12: Functions
# =============================================================================
def _single_line(text: str | None) -> str:
    """Return ``text`` with line breaks collapsed to spaces, ``""`` for ``None``."""
    if not text:
        return ""
    return " ".join(text.splitlines())
