"""Provider error code → AuthenticationError mapping.

The provider's error vocabulary is large and versioned independently of this
codebase. Codes outside PROVIDER_ERROR_CODES map to the unknown variant
instead of failing, so new provider codes degrade safely.
"""

from types import MappingProxyType

from auth_gateway.core.enums import ErrorCode
from auth_gateway.domain.errors import AuthenticationError

PROVIDER_ERROR_CODES: MappingProxyType[str, ErrorCode] = MappingProxyType(
    {
        "email-already-in-use": ErrorCode.EMAIL_ALREADY_IN_USE,
        "invalid-email": ErrorCode.INVALID_EMAIL,
        "operation-not-allowed": ErrorCode.OPERATION_NOT_ALLOWED,
        "weak-password": ErrorCode.WEAK_PASSWORD,
        "user-disabled": ErrorCode.USER_DISABLED,
        "user-not-found": ErrorCode.USER_NOT_FOUND,
        "wrong-password": ErrorCode.WRONG_PASSWORD,
        "expired-action-code": ErrorCode.EXPIRED_CONFIRMATION_CODE,
        "invalid-action-code": ErrorCode.INVALID_CONFIRMATION_CODE,
    }
)


def map_provider_error(code: str, *, stack_trace: str = "") -> AuthenticationError:
    """Map a provider error code onto the authentication taxonomy.

    Total: returns exactly one variant for every input.

    Args:
        code: Provider error code (e.g. ``wrong-password``).
        stack_trace: Formatted traceback of the provider exception.

    Returns:
        The mapped variant, or AUTHENTICATION_UNKNOWN with ``raw_cause=code``.

    Example:
        >>> map_provider_error("wrong-password").cause
        'Wrong Password'
        >>> map_provider_error("quota-exceeded").raw_cause
        'quota-exceeded'
    """
    error_code = PROVIDER_ERROR_CODES.get(code)
    if error_code is None:
        return AuthenticationError.unknown(code, stack_trace=stack_trace)
    return AuthenticationError.of(error_code, stack_trace=stack_trace)
