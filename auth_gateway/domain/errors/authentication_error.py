"""Authentication error taxonomy.

AuthenticationError is a closed tagged variant: the ``code`` field is the tag
and may only take one of the AUTHENTICATION_ERROR_CODES. Every variant except
AUTHENTICATION_UNKNOWN has a fixed cause text. AUTHENTICATION_UNKNOWN is the
only variant accepting a free-form cause, kept verbatim in ``raw_cause``.

Architecture:
    - Domain layer error (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from auth_gateway.core.enums import ErrorCode
    from auth_gateway.domain.errors import AuthenticationError

    result = await gateway.login(credentials=credentials)
    match result:
        case Success():
            ...
        case Failure(error=AuthenticationError(code=ErrorCode.WRONG_PASSWORD)):
            ...
        case Failure(error=error):
            log(error.cause)
"""

from dataclasses import dataclass
from types import MappingProxyType

from auth_gateway.core.enums import AUTHENTICATION_ERROR_CODES, ErrorCode
from auth_gateway.core.errors import RequestError

UNKNOWN_CAUSE_PREFIX = "Unknown Error on Authentication: "

CAUSES: MappingProxyType[ErrorCode, str] = MappingProxyType(
    {
        ErrorCode.INVALID_CREDENTIALS: "Invalid Credentials",
        ErrorCode.INVALID_EMAIL: "Invalid Email",
        ErrorCode.EMAIL_ALREADY_IN_USE: "Email Already In Use",
        ErrorCode.WEAK_PASSWORD: "Weak Password",
        ErrorCode.USER_DISABLED: "User Disabled",
        ErrorCode.USER_NOT_FOUND: "User Not Found",
        ErrorCode.WRONG_PASSWORD: "Wrong Password",
        ErrorCode.EXPIRED_CONFIRMATION_CODE: "Expired Confirmation Code",
        ErrorCode.INVALID_CONFIRMATION_CODE: "Invalid Confirmation Code",
        ErrorCode.OPERATION_NOT_ALLOWED: "Operation Not Allowed",
    }
)


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(RequestError):
    """Authentication failure returned by gateway operations.

    Prefer the ``of`` and ``unknown`` constructors, which fill in the cause
    text for the variant.

    Attributes:
        code: Variant tag (one of AUTHENTICATION_ERROR_CODES).
        message: Human-readable cause (also exposed as ``cause``).
        stack_trace: Formatted traceback captured at the failure site.
        raw_cause: Unclassified cause, set only on AUTHENTICATION_UNKNOWN.
        details: Additional context.
    """

    raw_cause: str | None = None

    def __post_init__(self) -> None:
        """Reject tags outside the authentication taxonomy.

        Raises:
            ValueError: If code is not an authentication error code.
        """
        if self.code not in AUTHENTICATION_ERROR_CODES:
            raise ValueError(f"Not an authentication error code: {self.code}")

    @property
    def is_unknown(self) -> bool:
        """Whether this is the catch-all variant."""
        return self.code is ErrorCode.AUTHENTICATION_UNKNOWN

    @classmethod
    def of(cls, code: ErrorCode, *, stack_trace: str = "") -> "AuthenticationError":
        """Build a named variant with its fixed cause text.

        Args:
            code: Variant tag. AUTHENTICATION_UNKNOWN yields an unknown error
                with an empty raw cause.
            stack_trace: Formatted traceback of the originating failure.

        Returns:
            AuthenticationError for the requested variant.

        Raises:
            ValueError: If code is not an authentication error code.
        """
        if code is ErrorCode.AUTHENTICATION_UNKNOWN:
            return cls.unknown(None, stack_trace=stack_trace)
        if code not in CAUSES:
            raise ValueError(f"Not an authentication error code: {code}")
        return cls(code=code, message=CAUSES[code], stack_trace=stack_trace)

    @classmethod
    def unknown(
        cls, cause: str | None, *, stack_trace: str = ""
    ) -> "AuthenticationError":
        """Build the catch-all variant.

        Args:
            cause: Free-form cause (provider code, exception text). None is
                treated as an empty cause.
            stack_trace: Formatted traceback of the originating failure.

        Returns:
            AuthenticationError tagged AUTHENTICATION_UNKNOWN.
        """
        raw_cause = cause or ""
        return cls(
            code=ErrorCode.AUTHENTICATION_UNKNOWN,
            message=f"{UNKNOWN_CAUSE_PREFIX}{raw_cause}",
            stack_trace=stack_trace,
            raw_cause=raw_cause,
        )

    @classmethod
    def from_request_error(cls, error: RequestError) -> "AuthenticationError":
        """Widen a generic request error into the authentication taxonomy.

        Used when a failure originates outside the provider call itself.

        Args:
            error: Any request-layer error.

        Returns:
            The error itself if it already is an AuthenticationError,
            otherwise the unknown variant carrying its cause and trace.
        """
        if isinstance(error, AuthenticationError):
            return error
        return cls.unknown(error.cause, stack_trace=error.stack_trace)

    @classmethod
    def from_exception(
        cls, error: Exception, stack_trace: str
    ) -> "AuthenticationError":
        """Convert an unanticipated exception into the unknown variant.

        Signature matches the ``on_error`` hook of ``safe_call``.
        """
        return cls.unknown(str(error) or type(error).__name__, stack_trace=stack_trace)
