"""Test suite for auth-gateway.

- unit/: Unit tests - domain logic, gateway behavior, adapters with mocks
- integration/: HTTP-level tests of the Identity Toolkit client (pytest-httpx)
"""
