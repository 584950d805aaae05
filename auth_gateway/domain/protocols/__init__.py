"""Domain protocols (ports).

Usage:
    from auth_gateway.domain.protocols import AuthenticationGatewayProtocol
"""

from auth_gateway.domain.protocols.authentication_gateway_protocol import (
    AuthenticationGatewayProtocol,
)
from auth_gateway.domain.protocols.identity_provider_protocol import (
    IdentityProviderException,
    IdentityProviderProtocol,
    IdentityProviderUser,
)
from auth_gateway.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "AuthenticationGatewayProtocol",
    "IdentityProviderException",
    "IdentityProviderProtocol",
    "IdentityProviderUser",
    "LoggerProtocol",
]
