"""Shared test fixtures for anilist_client unit tests."""

import json
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from anilist_client import AniListClient, ClientConfig, GraphQLTransport


def make_response(body: Any, status: int = 200) -> AsyncMock:
    """
    Create a mock aiohttp response.

    Parameters:
        body: JSON-serializable payload, or a ``str``/``bytes`` used verbatim as the body.
        status: HTTP status code.
    """
    response = AsyncMock()
    response.status = status
    if isinstance(body, str):
        body = body.encode("utf-8")
    elif not isinstance(body, bytes):
        body = json.dumps(body).encode("utf-8")
    response.read = AsyncMock(return_value=body)
    return response


def _cm(response: AsyncMock) -> AsyncMock:
    cm = AsyncMock()
    cm.__aenter__ = AsyncMock(return_value=response)
    cm.__aexit__ = AsyncMock(return_value=None)
    return cm


@pytest.fixture
def config() -> ClientConfig:
    """Configuration isolated from the environment and any .env file."""
    return ClientConfig(_env_file=None, api_token=None)


@pytest.fixture
def mock_session() -> MagicMock:
    """A session whose ``post`` returns an empty successful response by default."""
    session = MagicMock()
    session.post = MagicMock(return_value=_cm(make_response({"data": {}})))
    session.close = AsyncMock()
    return session


@pytest.fixture
def respond(mock_session: MagicMock) -> Callable[..., MagicMock]:
    """
    Program the mock session with one or more responses.

    ``respond(body)`` makes every request return ``body``;
    ``respond(body1, body2)`` returns them in order.
    """

    def _respond(*bodies: Any, status: int = 200) -> MagicMock:
        responses = [_cm(make_response(body, status)) for body in bodies]
        if len(responses) == 1:
            mock_session.post = MagicMock(return_value=responses[0])
        else:
            mock_session.post = MagicMock(side_effect=responses)
        return mock_session

    return _respond


@pytest.fixture
def transport(mock_session: MagicMock, config: ClientConfig) -> GraphQLTransport:
    return GraphQLTransport(session=mock_session, config=config)


@pytest.fixture
def client(transport: GraphQLTransport, config: ClientConfig) -> AniListClient:
    return AniListClient(config=config, transport=transport)

