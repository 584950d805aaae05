"""AuthenticationGatewayProtocol - the public authentication contract.

Application code depends on this protocol only. Every operation is a
coroutine returning a Result; none of them raises.

Implementations:
    - IdentityProviderAuthenticationGateway: delegates to an identity provider
    - FakeAuthenticationGateway: always succeeds (tests, local tooling)

Usage:
    from auth_gateway.core.container import get_authentication_gateway

    gateway = get_authentication_gateway()
    result = await gateway.login(credentials=credentials)
"""

from typing import Protocol

from auth_gateway.core.result import Result
from auth_gateway.domain.errors import AuthenticationError
from auth_gateway.domain.value_objects import Credentials


class AuthenticationGatewayProtocol(Protocol):
    """Protocol for authentication gateways.

    The gateway holds no session state. Anonymous/authenticated transitions
    (login and signup sign in, logout signs out) happen in the provider.
    """

    async def login(
        self, *, credentials: Credentials
    ) -> Result[None, AuthenticationError]:
        """Sign in with username and password.

        Args:
            credentials: Username (email) and password.

        Returns:
            Success(None) when signed in.
            Failure(AuthenticationError): commonly WRONG_PASSWORD,
                USER_NOT_FOUND, USER_DISABLED, INVALID_EMAIL, or
                AUTHENTICATION_UNKNOWN.
        """
        ...

    async def signup(
        self,
        *,
        credentials: Credentials,
        prevent_automatic_login: bool = False,
    ) -> Result[str, AuthenticationError]:
        """Create a password account.

        Args:
            credentials: Username (email) and password of the new account.
            prevent_automatic_login: Create the account in an isolated
                provider context so the current session stays unchanged.

        Returns:
            Success(uid) with the new account's unique identifier.
            Failure(AuthenticationError): EMAIL_ALREADY_IN_USE, WEAK_PASSWORD,
                INVALID_EMAIL, OPERATION_NOT_ALLOWED, or AUTHENTICATION_UNKNOWN.
        """
        ...

    async def logout(self) -> Result[None, AuthenticationError]:
        """Terminate the current session.

        Returns:
            Success(None), or Failure(AUTHENTICATION_UNKNOWN).
        """
        ...

    async def request_password_reset(
        self, *, email: str
    ) -> Result[None, AuthenticationError]:
        """Send an out-of-band password reset email.

        Returns:
            Success(None).
            Failure(AuthenticationError): INVALID_EMAIL, USER_NOT_FOUND, or
                AUTHENTICATION_UNKNOWN.
        """
        ...

    async def reset_password(
        self, *, new_password: str, confirmation_code: str
    ) -> Result[None, AuthenticationError]:
        """Complete a password reset with an out-of-band confirmation code.

        Returns:
            Success(None).
            Failure(AuthenticationError): EXPIRED_CONFIRMATION_CODE,
                INVALID_CONFIRMATION_CODE, WEAK_PASSWORD, or
                AUTHENTICATION_UNKNOWN.
        """
        ...

    async def authenticated(self) -> Result[bool, AuthenticationError]:
        """Report whether a session is currently active.

        Returns:
            Success(bool). Session-state queries do not fail with a domain
            error.
        """
        ...
