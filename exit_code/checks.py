"""Classification helpers for arbitrary integer exit codes."""

from __future__ import annotations

import logging

from exit_code.codes import ExitCode
from exit_code.errors import UnknownExitCodeError

log = logging.getLogger(__name__)

# Inclusive ranges with a shell or operating system defined meaning.
RESERVED_RANGES = ((0, 2), (64, 78), (126, 137))

MIN_EXIT_CODE = 0
MAX_EXIT_CODE = 255

SIGNAL_BASE = 128

_SHELL_MEANINGS = {
    0: "Success",
    1: "Catchall for general errors",
    2: "Misuse of shell built-ins",
    126: "Command invoked cannot execute",
    127: "Command not found",
    128: "Invalid argument to exit",
}


def is_reserved(code: int) -> bool:
    """
    Check whether an exit code has a special meaning in a shell.

    Reserved codes are 0-2 (success, general errors, shell built-in misuse),
    64-78 (the ``sysexits.h`` range) and 126-137 (not executable, not found,
    and fatal signals 0-9 added to 128).

    Parameters:
        code (int): Any integer, including negative or out-of-range values.

    Returns:
        bool: True if the code falls into one of the reserved ranges.
    """
    return any(low <= code <= high for low, high in RESERVED_RANGES)


def is_valid(code: int) -> bool:
    """Return whether the code is representable as a process exit status (0-255)."""
    return MIN_EXIT_CODE <= code <= MAX_EXIT_CODE


def describe(code: int) -> str:
    """
    Return the conventional meaning of a reserved exit code.

    Parameters:
        code (int): The exit code to describe.

    Returns:
        str: A short human-readable description.

    Raises:
        UnknownExitCodeError: If the code is not reserved.
    """
    if not is_reserved(code):
        log.debug("Exit code %r has no conventional meaning", code)
        raise UnknownExitCodeError(code)

    if code in _SHELL_MEANINGS:
        return _SHELL_MEANINGS[code]
    if code > SIGNAL_BASE:
        return f"Fatal error signal {code - SIGNAL_BASE}"
    return ExitCode.from_code(code).description


__all__ = ["RESERVED_RANGES", "describe", "is_reserved", "is_valid"]
