"""Exceptions raised by the AniList client."""

from typing import Any


class AniListError(Exception):
    """Base exception for AniList client errors."""


class NetworkError(AniListError):
    """Raised when the request fails at the transport level (connection, timeout)."""


class ApiError(AniListError):
    """Raised when AniList reports an error for a request.

    Attributes:
        message: The first error message reported by the API.
        code: The error status reported by the API, or the HTTP status.
        errors: The raw GraphQL ``errors`` array, if any.
    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(f"AniList API error ({code}): {message}")
        self.message = message
        self.code = code
        self.errors = errors or []


class DecodeError(AniListError):
    """Raised when the response body is not a JSON object."""


class DeserializeError(AniListError):
    """Raised when a JSON response does not match the expected model shape."""


class InvalidIdError(AniListError, ValueError):
    """Raised when an entity id is not a positive integer."""

    def __init__(self, value: Any):
        super().__init__(f"Invalid AniList id: {value!r}")
        self.value = value


class QueryError(AniListError):
    """Base exception for query catalog errors."""


class QueryNotFoundError(QueryError, KeyError):
    """Raised when no query template is registered for an entity kind and fetch mode."""

    def __init__(self, kind: str, mode: str):
        super().__init__(f"No query registered for {kind}/{mode}")
        self.kind = kind
        self.mode = mode

    def __str__(self) -> str:
        return str(self.args[0])


class QueryVariableError(QueryError, ValueError):
    """Raised when a variable is bound that the query document does not declare."""

    def __init__(self, template: str, names: list[str]):
        super().__init__(
            f"Query '{template}' does not declare variable(s): {', '.join(names)}"
        )
        self.template = template
        self.names = names
