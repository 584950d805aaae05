"""Centralized constants for internal implementation details.

These are NOT environment-specific configuration. For environment-specific
settings, use `auth_gateway/core/config.py` instead.
"""

# =============================================================================
# Identity provider
# =============================================================================

IDENTITY_TOOLKIT_BASE_URL: str = "https://identitytoolkit.googleapis.com/v1"
"""Identity Toolkit v1 REST API base URL."""

PROVIDER_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for identity provider calls in seconds."""

TEMPORARY_AUTHENTICATION_CONTEXT_PREFIX: str = "temporary_authentication"
"""Name prefix of the isolated provider contexts used by signup."""

DEFAULT_CONTEXT_NAME: str = "[DEFAULT]"
"""Name of the ambient (non-isolated) provider context."""


# =============================================================================
# Test double
# =============================================================================

FAKE_ACCOUNT_UID: str = "uid"
"""Account identifier returned by FakeAuthenticationGateway.signup()."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum response body length kept in provider error messages."""
