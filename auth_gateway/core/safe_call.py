"""Safe-call boundary.

``safe_call`` is the outermost safety net around an operation that returns a
Result. Whatever the operation returns passes through unchanged. Any
exception it raises is logged and converted into a Failure, so the caller
always receives a Result.

Usage:
    async def operation() -> Result[str, AuthenticationError]:
        ...

    result = await safe_call(
        operation,
        logger=logger,
        on_error=AuthenticationError.from_exception,
    )
"""

import traceback
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar

from auth_gateway.core.errors import UnknownError
from auth_gateway.core.result import Failure, Result

if TYPE_CHECKING:
    from auth_gateway.domain.protocols.logger_protocol import LoggerProtocol

T = TypeVar("T")
E = TypeVar("E")


def log_fault(
    logger: "LoggerProtocol",
    event: str,
    error: BaseException,
    *,
    stack_trace: str,
    **context: Any,
) -> None:
    """Record a caught fault.

    Purely observational. A failing logger never changes the outcome of the
    operation that caught the fault.

    Args:
        logger: Destination logger.
        event: Event name (e.g. ``provider_fault``).
        error: The caught exception.
        stack_trace: Formatted traceback of the exception.
        **context: Extra structured fields (operation, provider code).
    """
    try:
        logger.error(event, error=error, stack_trace=stack_trace, **context)
    except Exception:  # noqa: BLE001
        pass


async def safe_call(
    call: Callable[[], Awaitable[Result[T, E]]],
    /,
    *,
    logger: "LoggerProtocol",
    on_error: Callable[[Exception, str], E] | None = None,
    **context: Any,
) -> Result[T, E]:
    """Await ``call`` and convert any exception into a Failure.

    Args:
        call: Zero-argument coroutine function returning a Result. Positional
            only, so ``operation`` and other names stay free for ``context``.
        logger: Logger receiving an ``unhandled_fault`` event per caught
            exception.
        on_error: Builds the failure value from the exception and its
            formatted traceback. Defaults to a generic UnknownError.
        **context: Extra structured fields for the log event.

    Returns:
        The call's own Result, or Failure(on_error(...)) if it raised.
        Never raises for Exception subclasses; task cancellation and other
        BaseExceptions propagate.
    """
    try:
        return await call()
    except Exception as e:
        stack_trace = traceback.format_exc()
        log_fault(logger, "unhandled_fault", e, stack_trace=stack_trace, **context)
        return Failure(error=_build_error(e, stack_trace, on_error))


def _build_error(
    error: Exception,
    stack_trace: str,
    on_error: Callable[[Exception, str], E] | None,
) -> Any:
    if on_error is not None:
        try:
            return on_error(error, stack_trace)
        except Exception:  # noqa: BLE001
            # Fall through to the generic error below.
            pass
    return UnknownError(message=str(error) or type(error).__name__, stack_trace=stack_trace)
