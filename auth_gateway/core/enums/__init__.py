"""Core enums package.

Usage:
    from auth_gateway.core.enums import ErrorCode, Environment
"""

from auth_gateway.core.enums.environment import Environment
from auth_gateway.core.enums.error_code import AUTHENTICATION_ERROR_CODES, ErrorCode

__all__ = ["AUTHENTICATION_ERROR_CODES", "ErrorCode", "Environment"]
