"""Identity provider protocol (outbound port).

The provider authenticates credentials and owns the server-side session. It
signals failures by raising IdentityProviderException with a machine-readable
``code`` such as ``wrong-password`` or ``email-already-in-use``.

Protocol Pattern:
    - Domain defines the PORT (this protocol)
    - Infrastructure implements ADAPTERS (IdentityToolkitClient)
    - The gateway uses the protocol (provider-agnostic)
"""

from dataclasses import dataclass
from typing import Protocol


class IdentityProviderException(Exception):
    """Failure reported by the identity provider.

    Attributes:
        code: Machine-readable provider error code (kebab-case).
        message: Human-readable provider message.
    """

    def __init__(self, code: str, message: str = "") -> None:
        super().__init__(f"[{code}] {message}" if message else f"[{code}]")
        self.code = code
        self.message = message


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityProviderUser:
    """Signed-in provider account.

    Attributes:
        uid: Provider-unique account identifier.
        email: Account email, if the provider returned one.
        id_token: Short-lived identity token of the session.
        refresh_token: Token used by the provider to renew the session.
    """

    uid: str
    email: str | None = None
    id_token: str | None = None
    refresh_token: str | None = None


class IdentityProviderProtocol(Protocol):
    """Protocol for identity provider client contexts.

    A context holds at most one signed-in user (``current_user``). Isolated
    contexts share the provider configuration but not the session.
    """

    @property
    def name(self) -> str:
        """Context name (unique among a parent's open isolated contexts)."""
        ...

    @property
    def current_user(self) -> IdentityProviderUser | None:
        """Signed-in user of this context, or None when anonymous."""
        ...

    async def sign_in_with_password(
        self, *, email: str, password: str
    ) -> IdentityProviderUser:
        """Sign in and make the account this context's current user.

        Raises:
            IdentityProviderException: On any provider-reported failure.
        """
        ...

    async def create_account_with_password(
        self, *, email: str, password: str
    ) -> IdentityProviderUser:
        """Create an account; the new account becomes the current user.

        Raises:
            IdentityProviderException: On any provider-reported failure.
        """
        ...

    async def sign_out(self) -> None:
        """Clear the current user of this context."""
        ...

    async def send_password_reset_email(self, *, email: str) -> None:
        """Ask the provider to email a password reset code.

        Raises:
            IdentityProviderException: On any provider-reported failure.
        """
        ...

    async def confirm_password_reset(self, *, code: str, new_password: str) -> None:
        """Set a new password using an emailed confirmation code.

        Raises:
            IdentityProviderException: On any provider-reported failure.
        """
        ...

    async def create_isolated_context(self, *, name: str) -> "IdentityProviderProtocol":
        """Open a new context with the same configuration and no session.

        The caller owns the returned context and must ``dispose()`` it.

        Raises:
            IdentityProviderException: If a context with this name is open.
        """
        ...

    async def dispose(self) -> None:
        """Release the context's resources. Safe to call more than once."""
        ...
