"""Request-layer errors.

A RequestError is any failure of a request to an external collaborator. It
carries the formatted traceback captured where the failure was caught, so
diagnostics survive the trip back to the caller as a plain value.

Usage:
    from auth_gateway.core.errors import UnknownError
    from auth_gateway.core.result import Failure

    return Failure(error=UnknownError(message=str(exc), stack_trace=trace))
"""

from dataclasses import dataclass

from auth_gateway.core.enums import ErrorCode
from auth_gateway.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestError(DomainError):
    """Failure of a request to an external collaborator.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable cause.
        stack_trace: Formatted traceback captured at the failure site.
        details: Additional context.
    """

    stack_trace: str = ""

    @property
    def cause(self) -> str:
        """Human-readable cause of the failure."""
        return self.message


@dataclass(frozen=True, slots=True, kw_only=True)
class UnknownError(RequestError):
    """Failure that no layer knew how to classify."""

    code: ErrorCode = ErrorCode.UNKNOWN
