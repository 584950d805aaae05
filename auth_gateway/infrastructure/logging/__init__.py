"""Logging adapters implementing LoggerProtocol."""

from auth_gateway.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
