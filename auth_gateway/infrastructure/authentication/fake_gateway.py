"""Always-succeeding authentication gateway.

Deterministic stand-in for the live gateway in tests and local tooling. No
network, no randomness, no failure paths.
"""

from auth_gateway.core.constants import FAKE_ACCOUNT_UID
from auth_gateway.core.result import Result, Success
from auth_gateway.domain.errors import AuthenticationError
from auth_gateway.domain.value_objects import Credentials


class FakeAuthenticationGateway:
    """AuthenticationGatewayProtocol implementation that always succeeds.

    ``signup`` returns the fixed identifier ``"uid"`` and ``authenticated``
    always reports ``False``.
    """

    async def login(
        self, *, credentials: Credentials
    ) -> Result[None, AuthenticationError]:
        return Success(value=None)

    async def signup(
        self,
        *,
        credentials: Credentials,
        prevent_automatic_login: bool = False,
    ) -> Result[str, AuthenticationError]:
        return Success(value=FAKE_ACCOUNT_UID)

    async def logout(self) -> Result[None, AuthenticationError]:
        return Success(value=None)

    async def request_password_reset(
        self, *, email: str
    ) -> Result[None, AuthenticationError]:
        return Success(value=None)

    async def reset_password(
        self, *, new_password: str, confirmation_code: str
    ) -> Result[None, AuthenticationError]:
        return Success(value=None)

    async def authenticated(self) -> Result[bool, AuthenticationError]:
        return Success(value=False)
