"""
Structured logging for Wallet Registry.

JSON logs with timestamp, level, event_type and request-scoped context.
Use get_logger() in every module.
"""

from wallet_registry.registry_logging.logger import bind_request, get_logger

__all__ = ["bind_request", "get_logger"]
