"""Tests for configuranator.core.exceptions"""

from pathlib import Path

from configuranator.core import (
    ConfigIOError,
    ConfiguratorError,
    DecodeError,
    EncodeError,
    ErrorCode,
    InputExhaustedError,
    ParseError,
    PromptAttemptsExceededError,
    ValidationError,
)


class TestErrorCodes:
    def test_subclasses_carry_their_codes(self):
        assert ParseError("x").error_code == ErrorCode.PARSE_ERROR
        assert ValidationError("x").error_code == ErrorCode.VALIDATION_ERROR
        assert InputExhaustedError("x").error_code == ErrorCode.INPUT_EXHAUSTED
        assert PromptAttemptsExceededError("Port: ", 3).error_code == ErrorCode.ATTEMPTS_EXCEEDED
        assert DecodeError("a.toml", "x").error_code == ErrorCode.DECODE_FAILED
        assert EncodeError("x").error_code == ErrorCode.ENCODE_FAILED

    def test_all_are_configurator_errors(self):
        for err in (ParseError("x"), ConfigIOError("a.toml", "x"), EncodeError("x")):
            assert isinstance(err, ConfiguratorError)

    def test_default_code_is_internal(self):
        assert ConfiguratorError("boom").error_code == ErrorCode.INTERNAL_ERROR


class TestMessages:
    def test_to_dict(self):
        err = ParseError("Not an integer: 'x'", details={"text": "x"})
        assert err.to_dict() == {
            "error_type": "ParseError",
            "error_code": 1001,
            "message": "Not an integer: 'x'",
            "details": {"text": "x"},
        }

    def test_io_error_names_path(self):
        err = ConfigIOError("flight.toml", "Permission denied", ErrorCode.RESOURCE_UNWRITABLE)
        assert err.path == Path("flight.toml")
        assert err.user_message() == (
            "Error 3002: Could not write configuration file: flight.toml: Permission denied"
        )

    def test_decode_error_without_path(self):
        err = DecodeError(None, "Invalid TOML")
        assert err.path is None
        assert err.message == "Invalid TOML"

    def test_attempts_message(self):
        err = PromptAttemptsExceededError("Enter the port: ", 5)
        assert "'Enter the port:'" in err.message
        assert "5 attempts" in err.message
