"""Authentication gateway.

Exposes a small set of identity operations (login, signup, logout, password
reset, session check) over an external identity provider, returning explicit
Result values instead of raising.
"""

__version__ = "0.1.0"
