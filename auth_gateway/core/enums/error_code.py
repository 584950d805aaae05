"""Machine-readable error codes.

The authentication codes form the closed tag set of AuthenticationError.
AUTHENTICATION_UNKNOWN is the catch-all for provider failures this codebase
does not recognize. UNKNOWN is the generic code used by the safe-call
boundary when no domain-specific conversion is supplied.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_EMAIL = "invalid_email"
    EMAIL_ALREADY_IN_USE = "email_already_in_use"
    WEAK_PASSWORD = "weak_password"
    USER_DISABLED = "user_disabled"
    USER_NOT_FOUND = "user_not_found"
    WRONG_PASSWORD = "wrong_password"
    EXPIRED_CONFIRMATION_CODE = "expired_confirmation_code"
    INVALID_CONFIRMATION_CODE = "invalid_confirmation_code"
    OPERATION_NOT_ALLOWED = "operation_not_allowed"
    AUTHENTICATION_UNKNOWN = "authentication_unknown"

    # Generic request errors
    UNKNOWN = "unknown"


AUTHENTICATION_ERROR_CODES: frozenset[ErrorCode] = frozenset(
    {
        ErrorCode.INVALID_CREDENTIALS,
        ErrorCode.INVALID_EMAIL,
        ErrorCode.EMAIL_ALREADY_IN_USE,
        ErrorCode.WEAK_PASSWORD,
        ErrorCode.USER_DISABLED,
        ErrorCode.USER_NOT_FOUND,
        ErrorCode.WRONG_PASSWORD,
        ErrorCode.EXPIRED_CONFIRMATION_CODE,
        ErrorCode.INVALID_CONFIRMATION_CODE,
        ErrorCode.OPERATION_NOT_ALLOWED,
        ErrorCode.AUTHENTICATION_UNKNOWN,
    }
)
