"""Identity provider adapters implementing IdentityProviderProtocol."""

from auth_gateway.infrastructure.identity.identity_toolkit_client import (
    IdentityToolkitClient,
    translate_rest_error,
)

__all__ = ["IdentityToolkitClient", "translate_rest_error"]
