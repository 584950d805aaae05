"""Authentication gateway implementations.

Usage:
    from auth_gateway.infrastructure.authentication import (
        FakeAuthenticationGateway,
        IdentityProviderAuthenticationGateway,
    )
"""

from auth_gateway.infrastructure.authentication.error_mapper import map_provider_error
from auth_gateway.infrastructure.authentication.fake_gateway import (
    FakeAuthenticationGateway,
)
from auth_gateway.infrastructure.authentication.identity_provider_gateway import (
    IdentityProviderAuthenticationGateway,
)

__all__ = [
    "FakeAuthenticationGateway",
    "IdentityProviderAuthenticationGateway",
    "map_provider_error",
]
