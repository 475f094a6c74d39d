"""Logging adapters."""

from volunteer_hub.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
