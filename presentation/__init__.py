"""Presentation layer - Command-line interface."""
from .cli import QueryCommand, build_parser

__all__ = [
    "QueryCommand",
    "build_parser",
]
