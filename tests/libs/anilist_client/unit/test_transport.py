"""
Unit tests for GraphQLTransport.

Tests cover:
- Request payload and headers (with and without a bearer token)
- Classification of network, decode and GraphQL errors
- Single attempt per call (no retries)
- Session ownership and event-loop management
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from anilist_client import (
    ANILIST_API_URL,
    ApiError,
    DecodeError,
    GraphQLTransport,
    NetworkError,
)


class TestGraphQLTransportRequest:
    """Test request construction."""

    @pytest.mark.asyncio
    async def test_posts_query_and_variables(self, transport, respond):
        session = respond({"data": {"Media": {"id": 1}}})

        body = await transport.execute("query { Media { id } }", {"id": 1})

        assert body == {"data": {"Media": {"id": 1}}}
        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        assert args[0] == ANILIST_API_URL
        assert kwargs["json"] == {"query": "query { Media { id } }", "variables": {"id": 1}}

    @pytest.mark.asyncio
    async def test_variables_default_to_empty_object(self, transport, respond):
        session = respond({"data": {}})

        await transport.execute("query { Viewer { id } }")

        assert session.post.call_args.kwargs["json"]["variables"] == {}

    @pytest.mark.asyncio
    async def test_no_authorization_header_without_token(self, transport, respond):
        session = respond({"data": {}})

        await transport.execute("query { x }")

        headers = session.post.call_args.kwargs["headers"]
        assert "Authorization" not in headers
        assert headers["Content-Type"] == "application/json"
        assert headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_bearer_token_header(self, transport, respond):
        session = respond({"data": {}})

        await transport.execute("query { x }", token="secret")

        assert session.post.call_args.kwargs["headers"]["Authorization"] == "Bearer secret"


class TestGraphQLTransportErrors:
    """Test error classification."""

    @pytest.mark.asyncio
    async def test_graphql_errors_raise_api_error_with_first_message(self, transport, respond):
        respond(
            {
                "errors": [
                    {"message": "Not Found.", "status": 404},
                    {"message": "Second error", "status": 400},
                ],
                "data": {"Media": None},
            },
            status=404,
        )

        with pytest.raises(ApiError) as exc_info:
            await transport.execute("query { x }")

        assert exc_info.value.message == "Not Found."
        assert exc_info.value.code == 404
        assert len(exc_info.value.errors) == 2

    @pytest.mark.asyncio
    async def test_graphql_error_without_status_uses_http_status(self, transport, respond):
        respond({"errors": [{"message": "Invalid token"}]}, status=400)

        with pytest.raises(ApiError) as exc_info:
            await transport.execute("query { x }")

        assert exc_info.value.code == 400

    @pytest.mark.asyncio
    async def test_http_error_without_errors_array(self, transport, respond):
        respond({"data": None}, status=500)

        with pytest.raises(ApiError) as exc_info:
            await transport.execute("query { x }")

        assert exc_info.value.code == 500

    @pytest.mark.asyncio
    async def test_invalid_json_raises_decode_error(self, transport, respond):
        respond("<html>Bad Gateway</html>", status=502)

        with pytest.raises(DecodeError):
            await transport.execute("query { x }")

    @pytest.mark.asyncio
    async def test_non_object_json_raises_decode_error(self, transport, respond):
        respond("[1, 2, 3]")

        with pytest.raises(DecodeError):
            await transport.execute("query { x }")

    @pytest.mark.asyncio
    async def test_non_utf8_body_raises_decode_error(self, transport, respond):
        respond(b'{"data": {"Media": {"id": 1, "title": "\xff\xfe"}}}')

        with pytest.raises(DecodeError) as exc_info:
            await transport.execute("query { x }")

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    @pytest.mark.asyncio
    async def test_errors_object_instead_of_list_raises_decode_error(self, transport, respond):
        respond({"errors": {"message": "boom"}})

        with pytest.raises(DecodeError):
            await transport.execute("query { x }")

    @pytest.mark.asyncio
    async def test_empty_errors_list_is_success(self, transport, respond):
        respond({"errors": [], "data": {"Media": {"id": 1}}})

        body = await transport.execute("query { x }")

        assert body["data"] == {"Media": {"id": 1}}

    @pytest.mark.asyncio
    async def test_client_error_raises_network_error(self, transport, mock_session):
        mock_session.post = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))

        with pytest.raises(NetworkError) as exc_info:
            await transport.execute("query { x }")

        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)

    @pytest.mark.asyncio
    async def test_timeout_raises_network_error(self, transport, mock_session):
        cm = AsyncMock()
        cm.__aenter__ = AsyncMock(side_effect=asyncio.TimeoutError())
        cm.__aexit__ = AsyncMock(return_value=None)
        mock_session.post = MagicMock(return_value=cm)

        with pytest.raises(NetworkError):
            await transport.execute("query { x }")

    @pytest.mark.asyncio
    async def test_single_attempt_on_failure(self, transport, mock_session):
        mock_session.post = MagicMock(side_effect=aiohttp.ClientConnectionError("refused"))

        with pytest.raises(NetworkError):
            await transport.execute("query { x }")

        assert mock_session.post.call_count == 1


class TestGraphQLTransportSession:
    """Test session ownership and event-loop management."""

    def test_init_no_session_created(self, config):
        transport = GraphQLTransport(config=config)

        assert transport.session is None
        assert transport.url == ANILIST_API_URL

    @pytest.mark.asyncio
    async def test_owned_session_created_on_first_request(self, config, respond, mock_session):
        respond({"data": {}})
        transport = GraphQLTransport(config=config)

        with patch("aiohttp.ClientSession", return_value=mock_session) as session_cls:
            await transport.execute("query { x }")

        session_cls.assert_called_once()
        timeout = session_cls.call_args.kwargs["timeout"]
        assert timeout.total == config.timeout_seconds
        assert transport.session is mock_session
        assert transport._session_event_loop is asyncio.get_running_loop()

    @pytest.mark.asyncio
    async def test_owned_session_recreated_for_new_event_loop(self, config, respond, mock_session):
        respond({"data": {}})
        old_session = MagicMock()
        old_session.close = AsyncMock()
        transport = GraphQLTransport(config=config)
        transport.session = old_session
        transport._session_event_loop = "old_loop"

        with patch("aiohttp.ClientSession", return_value=mock_session):
            await transport.execute("query { x }")

        old_session.close.assert_awaited_once()
        assert transport.session is mock_session

    @pytest.mark.asyncio
    async def test_concurrent_requests_after_loop_change_share_one_session(
        self, config, respond, mock_session
    ):
        respond({"data": {}})

        async def slow_close():
            await asyncio.sleep(0)

        old_session = MagicMock()
        old_session.close = AsyncMock(side_effect=slow_close)
        transport = GraphQLTransport(config=config)
        transport.session = old_session
        transport._session_event_loop = "old_loop"

        with patch("aiohttp.ClientSession", return_value=mock_session) as session_cls:
            await asyncio.gather(
                transport.execute("query { a }"), transport.execute("query { b }")
            )

        session_cls.assert_called_once()
        old_session.close.assert_awaited_once()
        assert mock_session.post.call_count == 2

    @pytest.mark.asyncio
    async def test_close_owned_session(self, config, mock_session):
        transport = GraphQLTransport(config=config)
        transport.session = mock_session

        await transport.close()

        mock_session.close.assert_awaited_once()
        assert transport.session is None

    @pytest.mark.asyncio
    async def test_injected_session_is_not_closed(self, transport, mock_session):
        async with transport:
            pass

        mock_session.close.assert_not_awaited()
        assert transport.session is mock_session
