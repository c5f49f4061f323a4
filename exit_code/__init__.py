"""Common exit codes for applications."""

import logging

from exit_code import __version__ as about
from exit_code.checks import RESERVED_RANGES, describe, is_reserved, is_valid
from exit_code.codes import (
    CANNOT_CREATE,
    CONFIG_ERROR,
    DATA_ERROR,
    FAILURE,
    IO_ERROR,
    NO_HOST,
    NO_INPUT,
    NO_PERMISSION,
    NO_USER,
    OS_ERROR,
    OS_FILE_ERROR,
    PROTOCOL_ERROR,
    SERVICE_UNAVAILABLE,
    SOFTWARE_ERROR,
    SUCCESS,
    TEMPORARY_FAILURE,
    USAGE_ERROR,
    ExitCode,
)
from exit_code.errors import ExitCodeError, UnknownExitCodeError

__version__ = about.__version__

# Library code never configures the application's logging.
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "CANNOT_CREATE",
    "CONFIG_ERROR",
    "DATA_ERROR",
    "ExitCode",
    "ExitCodeError",
    "FAILURE",
    "IO_ERROR",
    "NO_HOST",
    "NO_INPUT",
    "NO_PERMISSION",
    "NO_USER",
    "OS_ERROR",
    "OS_FILE_ERROR",
    "PROTOCOL_ERROR",
    "RESERVED_RANGES",
    "SERVICE_UNAVAILABLE",
    "SOFTWARE_ERROR",
    "SUCCESS",
    "TEMPORARY_FAILURE",
    "USAGE_ERROR",
    "UnknownExitCodeError",
    "__version__",
    "describe",
    "is_reserved",
    "is_valid",
    "logger",
]
