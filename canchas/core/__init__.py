"""Core utilities for the canchas service."""

from canchas.core.config import settings
from canchas.core.error_handlers import register_exception_handlers
from canchas.core.logging_config import setup_logging

__all__ = ["settings", "register_exception_handlers", "setup_logging"]
