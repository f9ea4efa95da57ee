"""Asynchronous client library for the AniList GraphQL API.

This library contains:
- A single-attempt GraphQL transport over aiohttp
- A fixed catalog of parameterized query documents
- Typed pydantic models for anime, manga, characters, staff, studios and users
- The ``AniListClient`` façade with get/search methods per entity kind
"""

from .client import AniListClient
from .config import ANILIST_API_URL, ClientConfig, get_client_config
from .exceptions import (
    AniListError,
    ApiError,
    DecodeError,
    DeserializeError,
    InvalidIdError,
    NetworkError,
    QueryError,
    QueryNotFoundError,
    QueryVariableError,
)
from .transport import GraphQLTransport

Client = AniListClient

__all__ = [
    "ANILIST_API_URL",
    "AniListClient",
    "AniListError",
    "ApiError",
    "Client",
    "ClientConfig",
    "DecodeError",
    "DeserializeError",
    "GraphQLTransport",
    "InvalidIdError",
    "NetworkError",
    "QueryError",
    "QueryNotFoundError",
    "QueryVariableError",
    "get_client_config",
]
