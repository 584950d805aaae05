"""Container - centralized dependency injection (composition root).

Application-scoped singletons:
- Logging (structlog console adapter)
- Identity provider (Identity Toolkit REST client)
- Authentication gateway (live or fake, from AUTHENTICATION_BACKEND)

Usage:
    from auth_gateway.core.container import get_authentication_gateway

    gateway = get_authentication_gateway()
    result = await gateway.authenticated()
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from auth_gateway.core.config import settings
from auth_gateway.core.enums import Environment

if TYPE_CHECKING:
    from auth_gateway.domain.protocols import (
        AuthenticationGatewayProtocol,
        IdentityProviderProtocol,
        LoggerProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from auth_gateway.infrastructure.logging.console_adapter import ConsoleAdapter

    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(
        use_json=settings.environment != Environment.DEVELOPMENT, level=level
    )


@lru_cache()
def get_identity_provider() -> "IdentityProviderProtocol":
    """Return the ambient identity provider context (app-scoped).

    Returns:
        IdentityToolkitClient configured from settings.

    Raises:
        ValueError: If IDENTITY_TOOLKIT_API_KEY is not configured.
    """
    from auth_gateway.infrastructure.identity.identity_toolkit_client import (
        IdentityToolkitClient,
    )

    if not settings.identity_toolkit_api_key:
        raise ValueError(
            "IDENTITY_TOOLKIT_API_KEY is required for the identity_toolkit backend"
        )
    return IdentityToolkitClient(
        api_key=settings.identity_toolkit_api_key,
        base_url=settings.identity_toolkit_base_url,
        timeout=settings.provider_timeout,
    )


@lru_cache()
def get_authentication_gateway() -> "AuthenticationGatewayProtocol":
    """Return the authentication gateway singleton.

    Selected by AUTHENTICATION_BACKEND:
        - 'identity_toolkit': IdentityProviderAuthenticationGateway
        - 'fake': FakeAuthenticationGateway

    Raises:
        ValueError: If the backend is unsupported or misconfigured.
    """
    backend = settings.authentication_backend

    if backend == "fake":
        from auth_gateway.infrastructure.authentication.fake_gateway import (
            FakeAuthenticationGateway,
        )

        return FakeAuthenticationGateway()

    elif backend == "identity_toolkit":
        from auth_gateway.infrastructure.authentication.identity_provider_gateway import (
            IdentityProviderAuthenticationGateway,
        )

        return IdentityProviderAuthenticationGateway(
            identity_provider=get_identity_provider(),
            logger=get_logger().bind(component="authentication_gateway"),
            context_prefix=settings.temporary_context_prefix,
        )

    else:
        raise ValueError(
            f"Unsupported AUTHENTICATION_BACKEND: {backend}. "
            "Supported: 'identity_toolkit', 'fake'"
        )
