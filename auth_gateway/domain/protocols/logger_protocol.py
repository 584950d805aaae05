"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging used by the gateway to record every
caught fault. Implementations MUST keep logs structured (key-value context)
and safe.

Security:
    - NEVER log passwords, id tokens, refresh tokens or API keys
    - Credentials are logged by username only

Usage:
    from auth_gateway.core.container import get_logger

    logger = get_logger()
    logger.error("provider_fault", error=exc, operation="login")

    # Operation-scoped logging with bind()
    op_logger = logger.bind(operation="signup")
    op_logger.info("isolated_context_opened", context=name)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (avoid f-strings; use context).
            error: Optional exception instance; implementations include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
