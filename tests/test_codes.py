"""Tests for the exit code catalogue."""

from __future__ import annotations

import pytest

from exit_code import codes
from exit_code.checks import is_reserved, is_valid
from exit_code.codes import ExitCode
from exit_code.errors import UnknownExitCodeError

EXPECTED_VALUES = {
    "SUCCESS": 0,
    "FAILURE": 1,
    "USAGE_ERROR": 64,
    "DATA_ERROR": 65,
    "NO_INPUT": 66,
    "NO_USER": 67,
    "NO_HOST": 68,
    "SERVICE_UNAVAILABLE": 69,
    "SOFTWARE_ERROR": 70,
    "OS_ERROR": 71,
    "OS_FILE_ERROR": 72,
    "CANNOT_CREATE": 73,
    "IO_ERROR": 74,
    "TEMPORARY_FAILURE": 75,
    "PROTOCOL_ERROR": 76,
    "NO_PERMISSION": 77,
    "CONFIG_ERROR": 78,
}


def test_module_constants_keep_their_values() -> None:
    """Verify every named constant keeps its published numeric value."""
    actual = {name: getattr(codes, name) for name in EXPECTED_VALUES}
    assert actual == EXPECTED_VALUES
    assert all(type(value) is int for value in actual.values())


def test_enum_matches_module_constants() -> None:
    """Verify the enum and the module constants describe the same table."""
    assert {member.name: member.value for member in ExitCode} == EXPECTED_VALUES
    assert ExitCode.NO_INPUT == codes.NO_INPUT


def test_every_named_code_is_reserved_and_valid() -> None:
    """Verify the catalogue stays inside the reserved and valid ranges."""
    for member in ExitCode:
        assert is_reserved(member) is True
        assert is_valid(member) is True


def test_every_member_has_description() -> None:
    """Verify each member exposes a non-empty description."""
    for member in ExitCode:
        assert member.description
    assert ExitCode.TEMPORARY_FAILURE.description == "Temporary failure, retry later"


def test_from_code_returns_member() -> None:
    """Verify integer lookups resolve to the matching member."""
    assert ExitCode.from_code(74) is ExitCode.IO_ERROR
    assert ExitCode.from_code(0) is ExitCode.SUCCESS


@pytest.mark.parametrize("code", [2, 63, 79, 127, -1, 1000])
def test_from_code_rejects_unknown_values(code: int) -> None:
    """Verify codes outside the catalogue raise a domain error."""
    with pytest.raises(UnknownExitCodeError) as excinfo:
        ExitCode.from_code(code)
    assert excinfo.value.code == code


def test_members_can_be_used_as_exit_status() -> None:
    """Verify members behave like integers when raised through SystemExit."""
    with pytest.raises(SystemExit) as excinfo:
        raise SystemExit(ExitCode.CONFIG_ERROR)
    assert excinfo.value.code == 78
