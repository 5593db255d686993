"""Structured logging for the StarCraft II client."""
from .config import bootstrap_logging, shutdown_logging
from .context import get_context, request_context
from .logger import StructuredLogger, get_logger

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "get_context",
    "request_context",
    "StructuredLogger",
    "get_logger",
]
