"""Result types for railway-oriented programming.

Gateway operations return a Result instead of raising. Failures are values
that the caller inspects, which keeps error handling explicit and testable.

Usage:
    result = await gateway.signup(credentials=credentials)
    match result:
        case Success(value=uid):
            print(f"Created account {uid}")
        case Failure(error=error):
            print(f"Signup failed: {error.cause}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
