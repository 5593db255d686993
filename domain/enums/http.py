"""HTTP-level enumerations shared by requests and the client configuration."""
from enum import Enum


class HTTPMethod(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class AuthMethod(Enum):
    """Where the API token travels on each request."""

    BEARER_TOKEN = "bearer"
    QUERY_PARAMETER = "query"

    @classmethod
    def from_setting(cls, value: str) -> "AuthMethod":
        """Map an AUTH_METHOD value; anything but ``query`` means bearer."""
        if (value or "").strip().lower() == cls.QUERY_PARAMETER.value:
            return cls.QUERY_PARAMETER
        return cls.BEARER_TOKEN


class SortDirection(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"
