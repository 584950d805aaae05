"""Domain errors package.

Usage:
    from auth_gateway.domain.errors import AuthenticationError
"""

from auth_gateway.domain.errors.authentication_error import AuthenticationError

__all__ = ["AuthenticationError"]
