"""Unit tests for the Credentials value object."""

import dataclasses

import pytest

from auth_gateway.domain.value_objects import Credentials


@pytest.mark.unit
class TestCredentials:
    """Test Credentials construction and immutability."""

    def test_holds_username_and_password(self):
        credentials = Credentials(username="a@b.com", password="secret")

        assert credentials.username == "a@b.com"
        assert credentials.password == "secret"

    def test_from_email_maps_email_to_username(self):
        credentials = Credentials.from_email(email="a@b.com", password="secret")

        assert credentials == Credentials(username="a@b.com", password="secret")

    def test_is_immutable(self):
        credentials = Credentials(username="a@b.com", password="secret")

        with pytest.raises(dataclasses.FrozenInstanceError):
            credentials.password = "other"  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("username", "password"), [(None, "secret"), ("a@b.com", None)]
    )
    def test_rejects_missing_fields(self, username, password):
        with pytest.raises(ValueError):
            Credentials(username=username, password=password)

    def test_performs_no_format_validation(self):
        credentials = Credentials(username="not-an-email", password="")

        assert credentials.username == "not-an-email"

    def test_repr_masks_password(self):
        credentials = Credentials(username="a@b.com", password="secret")

        assert "secret" not in repr(credentials)
        assert "a@b.com" in repr(credentials)
