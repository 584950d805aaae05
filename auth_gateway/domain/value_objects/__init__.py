"""Domain value objects."""

from auth_gateway.domain.value_objects.credentials import Credentials

__all__ = ["Credentials"]
