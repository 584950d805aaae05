"""Authentication gateway backed by an identity provider.

Every public operation runs inside two layers of fault handling:

1. The operation body catches IdentityProviderException, logs it, and maps
   its code through ``map_provider_error``.
2. ``safe_call`` catches everything else and returns the
   AUTHENTICATION_UNKNOWN variant.

Callers therefore only ever see Success or Failure(AuthenticationError),
never a provider exception type.

Architecture:
    - Infrastructure layer (adapter over IdentityProviderProtocol)
    - Implements AuthenticationGatewayProtocol
    - Holds no session state; the provider does
"""

import traceback
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import TypeVar
from uuid import uuid4

from auth_gateway.core.constants import TEMPORARY_AUTHENTICATION_CONTEXT_PREFIX
from auth_gateway.core.result import Failure, Result, Success
from auth_gateway.core.safe_call import log_fault, safe_call
from auth_gateway.domain.errors import AuthenticationError
from auth_gateway.domain.protocols import (
    IdentityProviderException,
    IdentityProviderProtocol,
    LoggerProtocol,
)
from auth_gateway.domain.value_objects import Credentials
from auth_gateway.infrastructure.authentication.error_mapper import map_provider_error

T = TypeVar("T")


class IdentityProviderAuthenticationGateway:
    """AuthenticationGatewayProtocol implementation over an identity provider.

    Attributes:
        _provider: Ambient provider context (owns the application session).
        _logger: Structured logger receiving every caught fault.
        _context_prefix: Name prefix of isolated signup contexts.

    Example:
        >>> gateway = IdentityProviderAuthenticationGateway(
        ...     identity_provider=client,
        ...     logger=get_logger(),
        ... )
        >>> result = await gateway.login(
        ...     credentials=Credentials.from_email(email="a@b.com", password="pw")
        ... )
    """

    def __init__(
        self,
        *,
        identity_provider: IdentityProviderProtocol,
        logger: LoggerProtocol,
        context_prefix: str = TEMPORARY_AUTHENTICATION_CONTEXT_PREFIX,
    ) -> None:
        self._provider = identity_provider
        self._logger = logger
        self._context_prefix = context_prefix

    async def login(
        self, *, credentials: Credentials
    ) -> Result[None, AuthenticationError]:
        """Sign in the ambient provider context with email and password."""

        async def sign_in() -> None:
            await self._provider.sign_in_with_password(
                email=credentials.username,
                password=credentials.password,
            )

        return await self._call("login", sign_in, username=credentials.username)

    async def signup(
        self,
        *,
        credentials: Credentials,
        prevent_automatic_login: bool = False,
    ) -> Result[str, AuthenticationError]:
        """Create a password account and return its uid.

        With ``prevent_automatic_login`` the account is created in an
        isolated provider context, released on every exit path, so the
        ambient session does not switch to the new account.
        """

        async def create_account() -> str:
            async with self._account_creation_context(
                isolated=prevent_automatic_login
            ) as provider:
                user = await provider.create_account_with_password(
                    email=credentials.username,
                    password=credentials.password,
                )
            return user.uid

        return await self._call(
            "signup",
            create_account,
            username=credentials.username,
            prevent_automatic_login=prevent_automatic_login,
        )

    async def logout(self) -> Result[None, AuthenticationError]:
        """Sign out the ambient context.

        Provider faults are not mapped here; any failure is reported as the
        unknown variant by the safe-call boundary.
        """

        async def sign_out() -> Result[None, AuthenticationError]:
            await self._provider.sign_out()
            return Success(value=None)

        return await safe_call(
            sign_out,
            logger=self._logger,
            on_error=AuthenticationError.from_exception,
            operation="logout",
        )

    async def request_password_reset(
        self, *, email: str
    ) -> Result[None, AuthenticationError]:
        """Have the provider email a password reset code to ``email``."""

        async def send_reset_email() -> None:
            await self._provider.send_password_reset_email(email=email)

        return await self._call(
            "request_password_reset", send_reset_email, username=email
        )

    async def reset_password(
        self, *, new_password: str, confirmation_code: str
    ) -> Result[None, AuthenticationError]:
        """Complete a password reset with the emailed confirmation code."""

        async def confirm_reset() -> None:
            await self._provider.confirm_password_reset(
                code=confirmation_code,
                new_password=new_password,
            )

        return await self._call("reset_password", confirm_reset)

    async def authenticated(self) -> Result[bool, AuthenticationError]:
        """Report whether the ambient context has a signed-in user."""

        async def has_current_user() -> Result[bool, AuthenticationError]:
            return Success(value=self._provider.current_user is not None)

        return await safe_call(
            has_current_user,
            logger=self._logger,
            on_error=AuthenticationError.from_exception,
            operation="authenticated",
        )

    async def _call(
        self,
        operation: str,
        call: Callable[[], Awaitable[T]],
        **context: object,
    ) -> Result[T, AuthenticationError]:
        """Run a provider call with provider-fault mapping and the boundary.

        Args:
            operation: Operation name for logging.
            call: Coroutine function performing the provider call.
            **context: Extra structured log fields (never secrets).

        Returns:
            Success(call result), Failure(mapped error) for provider faults,
            or Failure(AUTHENTICATION_UNKNOWN) for anything else.
        """

        async def mapped() -> Result[T, AuthenticationError]:
            try:
                return Success(value=await call())
            except IdentityProviderException as e:
                stack_trace = traceback.format_exc()
                log_fault(
                    self._logger,
                    "provider_fault",
                    e,
                    stack_trace=stack_trace,
                    operation=operation,
                    provider_code=e.code,
                    **context,
                )
                return Failure(error=map_provider_error(e.code, stack_trace=stack_trace))

        return await safe_call(
            mapped,
            logger=self._logger,
            on_error=AuthenticationError.from_exception,
            operation=operation,
            **context,
        )

    @asynccontextmanager
    async def _account_creation_context(
        self, *, isolated: bool
    ) -> AsyncIterator[IdentityProviderProtocol]:
        """Yield the provider context in which to create an account.

        Non-isolated: the ambient context. Isolated: a fresh context with a
        unique name, disposed exactly once when the block exits.
        """
        if not isolated:
            yield self._provider
            return

        name = f"{self._context_prefix}_{uuid4().hex}"
        context = await self._provider.create_isolated_context(name=name)
        self._logger.debug("isolated_context_opened", context=name)
        try:
            yield context
        finally:
            await self._dispose_quietly(context, name)

    async def _dispose_quietly(
        self, context: IdentityProviderProtocol, name: str
    ) -> None:
        # Release failures are logged only; the operation outcome stands.
        try:
            await context.dispose()
        except Exception as e:  # noqa: BLE001
            log_fault(
                self._logger,
                "isolated_context_dispose_failed",
                e,
                stack_trace=traceback.format_exc(),
                context=name,
            )
            return
        self._logger.debug("isolated_context_disposed", context=name)
