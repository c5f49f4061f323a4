"""Domain-specific exceptions raised by exit_code lookup helpers."""

from __future__ import annotations


class ExitCodeError(Exception):
    """Base exception for exit_code-specific failures."""


class UnknownExitCodeError(ExitCodeError, ValueError):
    """Raised when a code has no catalogued or conventional meaning."""

    def __init__(self, code: int) -> None:
        """Store the offending code for callers that inspect it."""
        super().__init__(f"Unknown exit code: {code}")
        self.code = code


__all__ = ["ExitCodeError", "UnknownExitCodeError"]
