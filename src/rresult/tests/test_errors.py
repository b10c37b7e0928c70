"""Tests for misuse exceptions and payload display."""

import pytest

from rresult import (
    ErrorCode,
    EscapeContractError,
    Propagate,
    UnwrapFailedError,
    display,
    failure,
    success,
)


class Opaque:
    """Payload whose repr() fails."""

    def __repr__(self) -> str:
        raise RuntimeError("no repr")


def test_unwrap_failed_error_message() -> None:
    exc = UnwrapFailedError("Testing expect", "emergency failure")

    assert str(exc) == "Testing expect: 'emergency failure'"
    assert exc.message == "Testing expect"
    assert exc.value == "emergency failure"
    assert exc.code is ErrorCode.UNWRAP_FAILED


def test_unwrap_failed_error_uninspectable_value() -> None:
    payload = Opaque()
    exc = UnwrapFailedError("msg", payload)

    assert str(exc) == "msg: <uninspectable value>"
    assert exc.value is payload


def test_unwrap_failed_error_custom_placeholder(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RRESULT_DISPLAY_PLACEHOLDER", "<opaque>")

    with pytest.raises(UnwrapFailedError, match="msg: <opaque>"):
        failure(Opaque()).expect("msg")
    assert repr(success(Opaque())) == "success(<opaque>)"


def test_display() -> None:
    assert display("boom") == "'boom'"
    assert display(None) == "None"
    assert display(Opaque()) == "<uninspectable value>"


def test_escape_contract_error() -> None:
    result = failure("e")
    exc = EscapeContractError(result)

    assert isinstance(exc, TypeError)
    assert exc.result is result
    assert exc.code is ErrorCode.ESCAPE_RETURNED
    assert "failure('e')" in str(exc)


def test_propagate_carries_result() -> None:
    result = failure("e")
    assert Propagate(result).result is result


def test_error_codes_are_strings() -> None:
    assert ErrorCode.UNWRAP_FAILED == "UNWRAP_FAILED"
    assert ErrorCode.ESCAPE_RETURNED == "ESCAPE_RETURNED"


@pytest.mark.parametrize(
    ("name", "value"),
    [("RRESULT_LOG_LEVEL", "verbose"), ("RRESULT_LOG_FORMAT", "xml"), ("RRESULT_DISPLAY_PLACEHOLDER", "")],
)
def test_unwrap_error_survives_invalid_settings(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    """Misconfiguration must not replace the unwrap error."""
    monkeypatch.setenv(name, value)

    with pytest.raises(UnwrapFailedError, match="called unwrap on a failure value: 'boom'"):
        failure("boom").unwrap()
    with pytest.raises(UnwrapFailedError):
        success(2).expect_failure("msg")


def test_placeholder_falls_back_on_invalid_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RRESULT_DISPLAY_PLACEHOLDER", "")

    assert display(Opaque()) == "<uninspectable value>"
    assert repr(failure(Opaque())) == "failure(<uninspectable value>)"
