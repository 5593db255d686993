"""Presentation CLI exports."""
from .query_command import QueryCommand, build_parser

__all__ = [
    "QueryCommand",
    "build_parser",
]
