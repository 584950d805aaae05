"""Credentials value object.

Immutable username/password pair passed to login and signup. Constructed per
call and never persisted. Format validation is left to the identity provider.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Credentials:
    """Username/password pair.

    Attributes:
        username: Account identifier (an email address for password accounts).
        password: Plain-text password, only ever forwarded to the provider.

    Raises:
        ValueError: If either field is None.

    Example:
        >>> Credentials.from_email(email="a@b.com", password="secret").username
        'a@b.com'
    """

    username: str
    password: str

    def __post_init__(self) -> None:
        """Require both fields to be present."""
        if self.username is None:
            raise ValueError("Credentials require a username")
        if self.password is None:
            raise ValueError("Credentials require a password")

    @classmethod
    def from_email(cls, *, email: str, password: str) -> "Credentials":
        """Build credentials for an email/password account."""
        return cls(username=email, password=password)

    def __repr__(self) -> str:
        """Return repr with the password masked."""
        return f"Credentials(username={self.username!r}, password='***')"
