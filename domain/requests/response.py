"""Response types: how a JSON payload becomes domain values and back.

Every entity exposes ``from_dict`` / ``to_dict``, so every response type
can both decode network payloads and encode values for the response cache.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ResponseType(Protocol):
    def decode(self, payload: Any) -> Any: ...

    def encode(self, value: Any) -> Any: ...


@dataclass(frozen=True)
class One:
    """A single JSON object decoded into ``model``."""

    model: type

    def decode(self, payload: Any) -> Any:
        if not isinstance(payload, dict):
            raise TypeError(f"Expected an object for {self.model.__name__}, got {type(payload).__name__}")
        return self.model.from_dict(payload)

    def encode(self, value: Any) -> Any:
        return value.to_dict()


@dataclass(frozen=True)
class ListOf:
    """A JSON array of objects decoded into a list of ``model``."""

    model: type

    def decode(self, payload: Any) -> list:
        if not isinstance(payload, list):
            raise TypeError(f"Expected a list of {self.model.__name__}, got {type(payload).__name__}")
        return [self.model.from_dict(item) for item in payload]

    def encode(self, value: Any) -> list:
        return [item.to_dict() for item in value]


class _Raw:
    """Pass-through for endpoints without a typed model."""

    def decode(self, payload: Any) -> Any:
        return payload

    def encode(self, value: Any) -> Any:
        return value

    def __repr__(self) -> str:
        return "RAW"


RAW = _Raw()


def as_response_type(value: Any) -> ResponseType:
    """Accept a response type, an entity class (decoded as ``One``) or None (raw)."""
    if value is None:
        return RAW
    if isinstance(value, type) and hasattr(value, "from_dict"):
        return One(value)
    if isinstance(value, ResponseType):
        return value
    raise TypeError(f"Unsupported response type: {value!r}")
