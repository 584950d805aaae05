"""Unit tests for the AuthenticationError taxonomy."""

import pytest

from auth_gateway.core.enums import AUTHENTICATION_ERROR_CODES, ErrorCode
from auth_gateway.core.errors import DomainError, RequestError, UnknownError
from auth_gateway.domain.errors import AuthenticationError
from auth_gateway.domain.errors.authentication_error import CAUSES


@pytest.mark.unit
class TestAuthenticationErrorVariants:
    """Test the closed variant set and cause texts."""

    def test_taxonomy_has_eleven_variants(self):
        assert len(AUTHENTICATION_ERROR_CODES) == 11
        assert ErrorCode.AUTHENTICATION_UNKNOWN in AUTHENTICATION_ERROR_CODES
        assert ErrorCode.UNKNOWN not in AUTHENTICATION_ERROR_CODES

    @pytest.mark.parametrize(
        ("code", "cause"),
        [
            (ErrorCode.INVALID_CREDENTIALS, "Invalid Credentials"),
            (ErrorCode.INVALID_EMAIL, "Invalid Email"),
            (ErrorCode.EMAIL_ALREADY_IN_USE, "Email Already In Use"),
            (ErrorCode.WEAK_PASSWORD, "Weak Password"),
            (ErrorCode.USER_DISABLED, "User Disabled"),
            (ErrorCode.USER_NOT_FOUND, "User Not Found"),
            (ErrorCode.WRONG_PASSWORD, "Wrong Password"),
            (ErrorCode.EXPIRED_CONFIRMATION_CODE, "Expired Confirmation Code"),
            (ErrorCode.INVALID_CONFIRMATION_CODE, "Invalid Confirmation Code"),
            (ErrorCode.OPERATION_NOT_ALLOWED, "Operation Not Allowed"),
        ],
    )
    def test_of_uses_fixed_cause(self, code, cause):
        error = AuthenticationError.of(code, stack_trace="trace")

        assert error.code == code
        assert error.cause == cause
        assert error.stack_trace == "trace"
        assert error.raw_cause is None
        assert not error.is_unknown

    def test_each_named_variant_has_distinct_cause(self):
        assert len(set(CAUSES.values())) == len(CAUSES)
        assert AuthenticationError.of(ErrorCode.USER_DISABLED).cause != (
            AuthenticationError.of(ErrorCode.WEAK_PASSWORD).cause
        )

    def test_of_unknown_code_builds_unknown_variant(self):
        error = AuthenticationError.of(ErrorCode.AUTHENTICATION_UNKNOWN)

        assert error.is_unknown
        assert error.raw_cause == ""

    def test_of_rejects_non_authentication_code(self):
        with pytest.raises(ValueError):
            AuthenticationError.of(ErrorCode.UNKNOWN)

    def test_direct_construction_rejects_non_authentication_code(self):
        with pytest.raises(ValueError):
            AuthenticationError(code=ErrorCode.UNKNOWN, message="nope")

    def test_is_a_request_error_not_an_exception(self):
        error = AuthenticationError.of(ErrorCode.WRONG_PASSWORD)

        assert isinstance(error, RequestError)
        assert isinstance(error, DomainError)
        assert not isinstance(error, Exception)

    def test_str_includes_code_and_cause(self):
        error = AuthenticationError.of(ErrorCode.WRONG_PASSWORD)

        assert str(error) == "wrong_password: Wrong Password"


@pytest.mark.unit
class TestUnknownVariant:
    """Test the free-form catch-all variant."""

    def test_unknown_keeps_raw_cause(self):
        error = AuthenticationError.unknown("quota-exceeded", stack_trace="tb")

        assert error.code == ErrorCode.AUTHENTICATION_UNKNOWN
        assert error.raw_cause == "quota-exceeded"
        assert error.cause == "Unknown Error on Authentication: quota-exceeded"
        assert error.stack_trace == "tb"
        assert error.is_unknown

    def test_unknown_accepts_none(self):
        error = AuthenticationError.unknown(None)

        assert error.raw_cause == ""
        assert error.cause == "Unknown Error on Authentication: "

    def test_from_exception_uses_exception_text(self):
        error = AuthenticationError.from_exception(RuntimeError("offline"), "tb")

        assert error.raw_cause == "offline"
        assert error.stack_trace == "tb"


@pytest.mark.unit
class TestFromRequestError:
    """Test widening generic request errors into the taxonomy."""

    def test_authentication_error_is_returned_as_is(self):
        error = AuthenticationError.of(ErrorCode.USER_NOT_FOUND)

        assert AuthenticationError.from_request_error(error) is error

    def test_generic_error_becomes_unknown(self):
        generic = UnknownError(message="connection reset", stack_trace="tb")

        error = AuthenticationError.from_request_error(generic)

        assert error.code == ErrorCode.AUTHENTICATION_UNKNOWN
        assert error.raw_cause == "connection reset"
        assert error.stack_trace == "tb"
