"""Per-request logging context.

The client binds the request being executed (path, method, page) so that
every record emitted underneath it, retries and cache lookups included,
carries those fields. asyncio copies the context into each task, so
concurrent requests never see each other's values.
"""
from __future__ import annotations

import contextlib
import contextvars
from typing import Any, Dict, Iterator, Optional

_request: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("sc2_request", default={})


def get_context() -> Dict[str, Any]:
    return dict(_request.get())


@contextlib.contextmanager
def request_context(
    path: str, *, method: Optional[str] = None, page: Optional[int] = None
) -> Iterator[Dict[str, Any]]:
    """Bind one request's fields for the duration of a ``with`` block.

    Nested blocks add to (and may override) the outer binding.
    """
    fields = {k: v for k, v in (("path", path), ("method", method), ("page", page)) if v is not None}
    token = _request.set({**_request.get(), **fields})
    try:
        yield get_context()
    finally:
        _request.reset(token)
