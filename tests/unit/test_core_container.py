"""Unit tests for container factories.

Tests cover:
- Logger adapter configuration per environment
- Gateway backend selection (fake / identity_toolkit / unsupported)
- Identity provider configuration and missing API key
- Singleton behavior

Architecture:
- Unit tests with mocked settings
- Caches cleared around every test
"""

from unittest.mock import MagicMock, patch

import pytest

from auth_gateway.core.container import (
    get_authentication_gateway,
    get_identity_provider,
    get_logger,
)
from auth_gateway.core.enums import Environment
from auth_gateway.infrastructure.authentication import (
    FakeAuthenticationGateway,
    IdentityProviderAuthenticationGateway,
)


@pytest.fixture(autouse=True)
def clear_container_caches():
    for factory in (get_logger, get_identity_provider, get_authentication_gateway):
        factory.cache_clear()
    yield
    for factory in (get_logger, get_identity_provider, get_authentication_gateway):
        factory.cache_clear()


@pytest.fixture
def mock_settings():
    with patch("auth_gateway.core.container.settings") as settings:
        settings.environment = Environment.DEVELOPMENT
        settings.debug = False
        settings.log_level = "INFO"
        settings.authentication_backend = "identity_toolkit"
        settings.identity_toolkit_api_key = "key-123"
        settings.identity_toolkit_base_url = "https://identitytoolkit.test/v1"
        settings.provider_timeout = 7.5
        settings.temporary_context_prefix = "temporary_authentication"
        yield settings


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger()."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_selects_renderer_by_environment(self, mock_settings, environment, use_json):
        mock_settings.environment = environment

        with patch(
            "auth_gateway.infrastructure.logging.console_adapter.ConsoleAdapter"
        ) as mock_console:
            logger = get_logger()

        mock_console.assert_called_once_with(use_json=use_json, level="INFO")
        assert logger == mock_console.return_value

    def test_debug_forces_debug_level(self, mock_settings):
        mock_settings.debug = True

        with patch(
            "auth_gateway.infrastructure.logging.console_adapter.ConsoleAdapter"
        ) as mock_console:
            get_logger()

        assert mock_console.call_args.kwargs["level"] == "DEBUG"

    def test_uses_singleton_pattern(self, mock_settings):
        with patch(
            "auth_gateway.infrastructure.logging.console_adapter.ConsoleAdapter"
        ) as mock_console:
            assert get_logger() is get_logger()

        mock_console.assert_called_once()


@pytest.mark.unit
class TestGetIdentityProvider:
    """Test get_identity_provider()."""

    def test_builds_identity_toolkit_client(self, mock_settings):
        with patch(
            "auth_gateway.infrastructure.identity.identity_toolkit_client.IdentityToolkitClient"
        ) as mock_client:
            provider = get_identity_provider()

        mock_client.assert_called_once_with(
            api_key="key-123",
            base_url="https://identitytoolkit.test/v1",
            timeout=7.5,
        )
        assert provider == mock_client.return_value

    def test_missing_api_key_raises(self, mock_settings):
        mock_settings.identity_toolkit_api_key = None

        with pytest.raises(ValueError, match="IDENTITY_TOOLKIT_API_KEY"):
            get_identity_provider()


@pytest.mark.unit
class TestGetAuthenticationGateway:
    """Test get_authentication_gateway()."""

    def test_fake_backend(self, mock_settings):
        mock_settings.authentication_backend = "fake"

        assert isinstance(get_authentication_gateway(), FakeAuthenticationGateway)

    def test_identity_toolkit_backend(self, mock_settings):
        with (
            patch("auth_gateway.core.container.get_logger") as mock_get_logger,
            patch(
                "auth_gateway.infrastructure.identity.identity_toolkit_client.IdentityToolkitClient"
            ) as mock_client,
        ):
            mock_get_logger.return_value = MagicMock()
            gateway = get_authentication_gateway()

            assert isinstance(gateway, IdentityProviderAuthenticationGateway)
            assert gateway._provider is mock_client.return_value
            assert get_identity_provider() is mock_client.return_value

        mock_client.assert_called_once()
        mock_get_logger.return_value.bind.assert_called_once_with(
            component="authentication_gateway"
        )

    def test_unsupported_backend_raises(self, mock_settings):
        mock_settings.authentication_backend = "ldap"

        with pytest.raises(ValueError, match="Unsupported AUTHENTICATION_BACKEND"):
            get_authentication_gateway()

    def test_uses_singleton_pattern(self, mock_settings):
        mock_settings.authentication_backend = "fake"

        assert get_authentication_gateway() is get_authentication_gateway()
