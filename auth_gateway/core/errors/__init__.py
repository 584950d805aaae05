"""Core errors package.

Usage:
    from auth_gateway.core.errors import DomainError, RequestError, UnknownError
"""

from auth_gateway.core.errors.domain_error import DomainError
from auth_gateway.core.errors.request_error import RequestError, UnknownError

__all__ = [
    "DomainError",
    "RequestError",
    "UnknownError",
]
