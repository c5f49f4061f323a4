"""Catalogue of process exit codes following the BSD ``sysexits.h`` convention.

Example::

    import sys
    import exit_code

    sys.exit(exit_code.SUCCESS)
"""

from __future__ import annotations

import logging
from enum import IntEnum

from exit_code.errors import UnknownExitCodeError

log = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Represents the well-known exit codes."""

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    DATA_ERROR = 65
    NO_INPUT = 66
    NO_USER = 67
    NO_HOST = 68
    SERVICE_UNAVAILABLE = 69
    SOFTWARE_ERROR = 70
    OS_ERROR = 71
    OS_FILE_ERROR = 72
    CANNOT_CREATE = 73
    IO_ERROR = 74
    TEMPORARY_FAILURE = 75
    PROTOCOL_ERROR = 76
    NO_PERMISSION = 77
    CONFIG_ERROR = 78

    @property
    def description(self) -> str:
        """Return the one-line meaning of this exit code."""
        return _DESCRIPTIONS[self]

    @classmethod
    def from_code(cls, code: int) -> ExitCode:
        """
        Look up the catalogue member for an integer exit code.

        Parameters:
            code (int): The exit code to look up.

        Returns:
            ExitCode: The matching member.

        Raises:
            UnknownExitCodeError: If the code is not part of the catalogue.
        """
        try:
            return cls(code)
        except ValueError:
            log.debug("No catalogued exit code for %r", code)
            raise UnknownExitCodeError(code) from None


_DESCRIPTIONS = {
    ExitCode.SUCCESS: "Successful termination",
    ExitCode.FAILURE: "Unsuccessful termination for an unknown reason",
    ExitCode.USAGE_ERROR: "The command was used incorrectly",
    ExitCode.DATA_ERROR: "The input data was incorrect",
    ExitCode.NO_INPUT: "An input file did not exist or was not readable",
    ExitCode.NO_USER: "The specified user did not exist",
    ExitCode.NO_HOST: "The specified host did not exist",
    ExitCode.SERVICE_UNAVAILABLE: "A required service is unavailable",
    ExitCode.SOFTWARE_ERROR: "An internal software error has been detected",
    ExitCode.OS_ERROR: "An operating system error has been detected",
    ExitCode.OS_FILE_ERROR: "A system file is missing or malformed",
    ExitCode.CANNOT_CREATE: "A user specified output file cannot be created",
    ExitCode.IO_ERROR: "An error occurred while doing I/O on some file",
    ExitCode.TEMPORARY_FAILURE: "Temporary failure, retry later",
    ExitCode.PROTOCOL_ERROR: "The remote system violated the protocol",
    ExitCode.NO_PERMISSION: "Insufficient permissions to perform the operation",
    ExitCode.CONFIG_ERROR: "Something was found in an unconfigured or misconfigured state",
}

# Successful termination.
SUCCESS: int = ExitCode.SUCCESS.value

# Catch-all for failures whose reason is unknown.
FAILURE: int = ExitCode.FAILURE.value

# Wrong number of arguments, a bad flag, bad syntax in a parameter, etc.
USAGE_ERROR: int = ExitCode.USAGE_ERROR.value

# User data was incorrect; not for system files.
DATA_ERROR: int = ExitCode.DATA_ERROR.value

# An input file (not a system file) did not exist or was not readable.
NO_INPUT: int = ExitCode.NO_INPUT.value

# The specified user did not exist, e.g. a mail address or remote login.
NO_USER: int = ExitCode.NO_USER.value

# The specified host did not exist.
NO_HOST: int = ExitCode.NO_HOST.value

# A support program or file does not exist, or a catch-all when something
# does not work for an unknown reason.
SERVICE_UNAVAILABLE: int = ExitCode.SERVICE_UNAVAILABLE.value

# Internal software error, limited to non-operating system errors.
SOFTWARE_ERROR: int = ExitCode.SOFTWARE_ERROR.value

# "cannot fork", "cannot create pipe", getuid returning an unknown user.
OS_ERROR: int = ExitCode.OS_ERROR.value

# A system file (/etc/passwd, /var/run/utmp, ...) is missing, unreadable or
# has a syntax error.
OS_FILE_ERROR: int = ExitCode.OS_FILE_ERROR.value

# A user specified output file cannot be created.
CANNOT_CREATE: int = ExitCode.CANNOT_CREATE.value

# An error occurred while doing I/O on some file.
IO_ERROR: int = ExitCode.IO_ERROR.value

# Not really an error; the request should be reattempted later.
TEMPORARY_FAILURE: int = ExitCode.TEMPORARY_FAILURE.value

# The remote system returned something "not possible" during a protocol exchange.
PROTOCOL_ERROR: int = ExitCode.PROTOCOL_ERROR.value

# Higher level permission problems. File system problems should use
# NO_INPUT or CANNOT_CREATE instead.
NO_PERMISSION: int = ExitCode.NO_PERMISSION.value

# Something was found in an unconfigured or misconfigured state.
CONFIG_ERROR: int = ExitCode.CONFIG_ERROR.value

__all__ = [
    "CANNOT_CREATE",
    "CONFIG_ERROR",
    "DATA_ERROR",
    "ExitCode",
    "FAILURE",
    "IO_ERROR",
    "NO_HOST",
    "NO_INPUT",
    "NO_PERMISSION",
    "NO_USER",
    "OS_ERROR",
    "OS_FILE_ERROR",
    "PROTOCOL_ERROR",
    "SERVICE_UNAVAILABLE",
    "SOFTWARE_ERROR",
    "SUCCESS",
    "TEMPORARY_FAILURE",
    "USAGE_ERROR",
]
