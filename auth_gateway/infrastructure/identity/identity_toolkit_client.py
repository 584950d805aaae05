"""Identity Toolkit REST client.

Implements IdentityProviderProtocol against the Identity Toolkit v1 REST API
(email/password accounts). Each client instance is one provider context: it
owns an ``httpx.AsyncClient`` and at most one signed-in user.

Error handling:
    The API reports failures as ``{"error": {"message": "EMAIL_EXISTS"}}``.
    Messages are translated to the provider's kebab-case codes
    (``email-already-in-use``) and raised as IdentityProviderException, the
    fault type the gateway maps. Transport failures raise
    ``network-request-failed``.

Architecture:
    - Infrastructure layer (adapter for an external API)
    - Uses httpx for async HTTP
    - Raises provider faults; the gateway turns them into Results

Reference:
    - https://cloud.google.com/identity-platform/docs/use-rest-api
"""

from types import MappingProxyType
from typing import Any

import httpx
import structlog

from auth_gateway.core.constants import (
    DEFAULT_CONTEXT_NAME,
    IDENTITY_TOOLKIT_BASE_URL,
    PROVIDER_TIMEOUT_DEFAULT,
    RESPONSE_BODY_MAX_LENGTH,
)
from auth_gateway.domain.protocols import (
    IdentityProviderException,
    IdentityProviderUser,
)

# REST error message → provider error code
REST_ERROR_CODES: MappingProxyType[str, str] = MappingProxyType(
    {
        "EMAIL_EXISTS": "email-already-in-use",
        "INVALID_EMAIL": "invalid-email",
        "OPERATION_NOT_ALLOWED": "operation-not-allowed",
        "PASSWORD_LOGIN_DISABLED": "operation-not-allowed",
        "WEAK_PASSWORD": "weak-password",
        "USER_DISABLED": "user-disabled",
        "EMAIL_NOT_FOUND": "user-not-found",
        "USER_NOT_FOUND": "user-not-found",
        "INVALID_PASSWORD": "wrong-password",
        "EXPIRED_OOB_CODE": "expired-action-code",
        "INVALID_OOB_CODE": "invalid-action-code",
        "INVALID_LOGIN_CREDENTIALS": "invalid-credential",
        "TOO_MANY_ATTEMPTS_TRY_LATER": "too-many-requests",
    }
)


def translate_rest_error(message: str) -> IdentityProviderException:
    """Build the provider exception for a REST error message.

    Args:
        message: Error message from the response body, optionally followed
            by ``" : <detail>"`` (e.g. ``"WEAK_PASSWORD : Password should be
            at least 6 characters"``).

    Returns:
        IdentityProviderException with the translated code and the detail
        (or the raw message) as its message.
    """
    reason, _, detail = message.partition(" : ")
    reason = reason.strip()
    code = REST_ERROR_CODES.get(reason) or reason.lower().replace("_", "-")
    return IdentityProviderException(code or "internal-error", detail.strip() or message)


class IdentityToolkitClient:
    """Identity provider context backed by the Identity Toolkit REST API.

    Isolated contexts created by ``create_isolated_context`` share the API
    key, base URL and timeout, but have their own HTTP client and session.
    The parent tracks open isolated contexts by name until they are disposed.

    Attributes:
        _api_key: Web API key sent as the ``key`` query parameter.
        _base_url: API base URL (without trailing slash).
        _timeout: HTTP request timeout in seconds.
        _current_user: Signed-in user of this context.
        _open_contexts: Open isolated contexts created from this one.
    """

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = IDENTITY_TOOLKIT_BASE_URL,
        timeout: float = PROVIDER_TIMEOUT_DEFAULT,
        name: str = DEFAULT_CONTEXT_NAME,
        parent: "IdentityToolkitClient | None" = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._name = name
        self._parent = parent
        self._http = httpx.AsyncClient(timeout=timeout)
        self._current_user: IdentityProviderUser | None = None
        self._open_contexts: dict[str, IdentityToolkitClient] = {}
        self._disposed = False
        self._logger = structlog.get_logger("identity_toolkit").bind(context=name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def current_user(self) -> IdentityProviderUser | None:
        return self._current_user

    @property
    def open_contexts(self) -> tuple[str, ...]:
        """Names of isolated contexts created here and not yet disposed."""
        return tuple(self._open_contexts)

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    async def sign_in_with_password(
        self, *, email: str, password: str
    ) -> IdentityProviderUser:
        data = await self._post(
            "accounts:signInWithPassword",
            {"email": email, "password": password, "returnSecureToken": True},
            operation="sign_in_with_password",
        )
        self._current_user = self._user_from_response(data)
        return self._current_user

    async def create_account_with_password(
        self, *, email: str, password: str
    ) -> IdentityProviderUser:
        data = await self._post(
            "accounts:signUp",
            {"email": email, "password": password, "returnSecureToken": True},
            operation="create_account_with_password",
        )
        self._current_user = self._user_from_response(data)
        return self._current_user

    async def sign_out(self) -> None:
        # Sessions are client-side tokens; signing out forgets them.
        self._current_user = None

    async def send_password_reset_email(self, *, email: str) -> None:
        await self._post(
            "accounts:sendOobCode",
            {"requestType": "PASSWORD_RESET", "email": email},
            operation="send_password_reset_email",
        )

    async def confirm_password_reset(self, *, code: str, new_password: str) -> None:
        await self._post(
            "accounts:resetPassword",
            {"oobCode": code, "newPassword": new_password},
            operation="confirm_password_reset",
        )

    async def create_isolated_context(self, *, name: str) -> "IdentityToolkitClient":
        """Open an isolated context sharing this context's configuration.

        Raises:
            IdentityProviderException: ``duplicate-app`` if ``name`` is open.
        """
        if name in self._open_contexts or name == self._name:
            raise IdentityProviderException(
                "duplicate-app", f"A provider context named {name!r} already exists"
            )
        context = IdentityToolkitClient(
            api_key=self._api_key,
            base_url=self._base_url,
            timeout=self._timeout,
            name=name,
            parent=self,
        )
        self._open_contexts[name] = context
        return context

    async def dispose(self) -> None:
        """Close the HTTP client and detach from the parent. Idempotent."""
        if self._disposed:
            return
        self._disposed = True
        self._current_user = None
        for context in list(self._open_contexts.values()):
            await context.dispose()
        if self._parent is not None:
            self._parent._open_contexts.pop(self._name, None)
        await self._http.aclose()

    async def _post(
        self, path: str, payload: dict[str, Any], *, operation: str
    ) -> dict[str, Any]:
        """POST to the API and return the decoded JSON object.

        Raises:
            IdentityProviderException: On transport errors, error responses,
                or bodies that are not JSON objects.
        """
        if self._disposed:
            raise IdentityProviderException(
                "app-deleted", f"Provider context {self._name!r} has been disposed"
            )

        try:
            response = await self._http.post(
                f"{self._base_url}/{path}",
                params={"key": self._api_key},
                json=payload,
            )
        except httpx.RequestError as e:
            self._logger.warning(
                "identity_toolkit_connection_error",
                operation=operation,
                error=str(e),
            )
            raise IdentityProviderException("network-request-failed", str(e)) from e

        try:
            data = response.json()
        except ValueError as e:
            self._logger.warning(
                "identity_toolkit_invalid_json",
                operation=operation,
                status_code=response.status_code,
            )
            raise IdentityProviderException(
                "internal-error",
                f"Invalid JSON response: {response.text[:RESPONSE_BODY_MAX_LENGTH]}",
            ) from e

        if not isinstance(data, dict):
            raise IdentityProviderException(
                "internal-error", f"Expected object response, got {type(data).__name__}"
            )

        if response.status_code != 200 or "error" in data:
            error = data.get("error")
            message = error.get("message") if isinstance(error, dict) else error
            self._logger.debug(
                "identity_toolkit_error_response",
                operation=operation,
                status_code=response.status_code,
                reason=message,
            )
            if not message:
                raise IdentityProviderException(
                    "internal-error", f"HTTP {response.status_code}"
                )
            raise translate_rest_error(str(message))

        self._logger.debug("identity_toolkit_succeeded", operation=operation)
        return data

    @staticmethod
    def _user_from_response(data: dict[str, Any]) -> IdentityProviderUser:
        uid = data.get("localId")
        if not uid:
            raise IdentityProviderException(
                "internal-error", "Response did not include an account id"
            )
        return IdentityProviderUser(
            uid=uid,
            email=data.get("email"),
            id_token=data.get("idToken"),
            refresh_token=data.get("refreshToken"),
        )
