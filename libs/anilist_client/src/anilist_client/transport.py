"""
GraphQL transport for the AniList API.

Sends a single HTTP POST per call and classifies failures into the client's
exception types. There is no retry or caching at this layer.
"""

import asyncio
import json
import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any, Optional, Type

import aiohttp

from .config import ANILIST_API_URL, ClientConfig, get_client_config
from .exceptions import ApiError, DecodeError, NetworkError

logger = logging.getLogger(__name__)


class GraphQLTransport:
    """HTTP transport for AniList GraphQL requests.

    Args:
        session: Optional aiohttp-style session supporting ``session.post(...)`` as an
            async context manager. An injected session is never closed by the transport.
        config: Optional configuration override. Defaults to the process-wide config.
    """

    def __init__(
        self,
        *,
        session: Any | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        self.url = ANILIST_API_URL
        self.config = config or get_client_config()
        self.session: Any | None = session
        self._owns_session = session is None
        self._session_event_loop: Optional[asyncio.AbstractEventLoop] = None

    @staticmethod
    def build_headers(token: str | None = None) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _get_session(self) -> Any:
        """
        Return the session for the running event loop, creating it if needed.

        Owned sessions are bound to the loop they were created on; when the running
        loop changes, the old session is closed and a new one is created.
        """
        if not self._owns_session:
            return self.session

        current_loop = asyncio.get_running_loop()
        if self.session is None or self._session_event_loop != current_loop:
            # Swap before awaiting so concurrent callers see the new session.
            old_session = self.session
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.timeout_seconds)
            )
            self._session_event_loop = current_loop
            logger.debug("AniList session created for current event loop")

            if old_session is not None:
                try:
                    await old_session.close()
                except Exception:
                    logger.debug("Ignoring error while closing old session", exc_info=True)

        return self.session

    async def execute(
        self,
        query: str,
        variables: Mapping[str, Any] | None = None,
        token: str | None = None,
    ) -> dict[str, Any]:
        """
        Send one GraphQL request and return the decoded response body.

        Parameters:
            query (str): GraphQL document.
            variables (Optional[Mapping[str, Any]]): GraphQL variables.
            token (Optional[str]): Bearer token; no Authorization header is sent without it.

        Returns:
            Dict[str, Any]: The full JSON response object (``{"data": ...}``).

        Raises:
            NetworkError: Connection failure or timeout.
            DecodeError: The body is not a UTF-8 JSON object, or its ``errors`` is not a list.
            ApiError: The body carries a GraphQL ``errors`` array, or the HTTP status
                is an error without one.
        """
        payload = {"query": query, "variables": dict(variables or {})}
        headers = self.build_headers(token)
        session = await self._get_session()

        try:
            async with session.post(self.url, json=payload, headers=headers) as response:
                status = response.status
                raw = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("AniList request failed: %r", e)
            raise NetworkError(f"AniList request failed: {e!r}") from e

        try:
            body = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(
                f"AniList returned invalid JSON (HTTP {status}): {e}"
            ) from e

        if not isinstance(body, dict):
            raise DecodeError(
                f"AniList returned {type(body).__name__} instead of a JSON object"
            )

        errors = body.get("errors")
        if errors and not isinstance(errors, list):
            raise DecodeError(
                f"AniList returned an errors {type(errors).__name__} instead of a list"
            )
        if errors:
            first = errors[0] if isinstance(errors[0], dict) else {"message": str(errors[0])}
            logger.warning("AniList GraphQL errors: %s", errors)
            raise ApiError(
                str(first.get("message", "Unknown error")),
                code=first.get("status", status),
                errors=errors,
            )

        if status >= 400:
            raise ApiError(f"HTTP {status}", code=status)

        return body

    async def close(self) -> None:
        """Close the owned aiohttp session, if one is open."""
        if self.session is not None and self._owns_session:
            await self.session.close()
            self.session = None
            self._session_event_loop = None

    async def __aenter__(self) -> "GraphQLTransport":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> bool:
        await self.close()
        return False
