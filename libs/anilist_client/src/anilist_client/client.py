"""
AniList client façade.

One method per entity kind and lookup mode. Each call is a single GraphQL round
trip through ``GraphQLTransport``; responses are validated into the typed models
of ``anilist_client.models``.
"""

import logging
from types import TracebackType
from typing import Any, Callable, Optional, Type, TypeVar

from pydantic import ValidationError

from .config import MAX_PER_PAGE, ClientConfig, get_client_config
from .exceptions import DeserializeError, InvalidIdError
from .models import Anime, Character, Manga, Page, Person, Studio, User
from .models.base import AniListModel, Entity
from .models.entities import coerce_media
from .queries import EntityKind, FetchMode, QueryTemplate, get_template
from .transport import GraphQLTransport

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=Entity)


def _check_id(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidIdError(value)
    return value


class AniListClient:
    """Asynchronous client for the AniList GraphQL API.

    Args:
        api_token: Bearer token sent with every request. Defaults to
            ``ClientConfig.api_token``; no Authorization header is sent without one.
        config: Optional configuration override.
        transport: Optional transport override. Clients derived with ``with_token``
            share their parent's transport and therefore its connection pool.

    Example:
        >>> async with AniListClient() as client:
        ...     anime = await client.get_anime(1)
        ...     print(anime.title.romaji)
    """

    def __init__(
        self,
        api_token: str | None = None,
        *,
        config: ClientConfig | None = None,
        transport: GraphQLTransport | None = None,
    ) -> None:
        self.config = config or get_client_config()
        self.api_token = api_token if api_token is not None else self.config.api_token
        self.transport = transport or GraphQLTransport(config=self.config)

    def with_token(self, token: str) -> "AniListClient":
        """Return a new client that authenticates with ``token``.

        The current client is left unchanged; both share the same transport.
        """
        return AniListClient(token, config=self.config, transport=self.transport)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def request(self, template: QueryTemplate, **variables: Any) -> dict[str, Any]:
        """
        Execute a catalog query and return the object under its root field.

        Raises:
            QueryVariableError: A variable is not declared by the template.
            DeserializeError: ``data`` or the root object is missing.
            NetworkError, ApiError, DecodeError: Propagated from the transport.
        """
        bound = template.bind(**variables)
        logger.debug("AniList %s request with variables %s", template.name, bound)
        body = await self.transport.execute(template.document, bound, token=self.api_token)

        data = body.get("data")
        if not isinstance(data, dict):
            raise DeserializeError(f"Response to {template.name} has no 'data' object")
        root = data.get(template.root)
        if not isinstance(root, dict):
            raise DeserializeError(
                f"Response to {template.name} has no '{template.root}' object"
            )
        return root

    def _validate(self, model: Type[EntityT], payload: Any, name: str) -> EntityT:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise DeserializeError(f"Unexpected {name} response shape: {e}") from e

    async def _get(
        self, kind: EntityKind, model: Type[EntityT], expected_id: int | None = None, **variables: Any
    ) -> EntityT:
        template = get_template(kind, FetchMode.GET)
        payload = await self.request(template, **variables)
        entity = self._validate(model, payload, template.name)
        if expected_id is not None and entity.id != expected_id:
            raise DeserializeError(
                f"Response to {template.name} carries id {entity.id}, expected {expected_id}"
            )
        entity.mark_full_loaded(self)
        return entity

    def _page_size(self, page: int, per_page: int | None) -> int:
        if per_page is None:
            per_page = self.config.default_per_page
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise ValueError(f"page must be a positive integer, got {page!r}")
        if (
            isinstance(per_page, bool)
            or not isinstance(per_page, int)
            or not 1 <= per_page <= MAX_PER_PAGE
        ):
            raise ValueError(
                f"per_page must be an integer between 1 and {MAX_PER_PAGE}, got {per_page!r}"
            )
        return per_page

    def _build_page(
        self,
        item_type: Any,
        container: dict[str, Any],
        template: QueryTemplate,
        per_page: int,
        coerce: Callable[[Any], Any] | None = None,
    ) -> Page[Any]:
        """
        Build a ``Page`` from a paged response.

        Handles both ``Page { pageInfo, <collection>: [...] }`` and
        ``<Entity> { <collection> { pageInfo, nodes: [...] } }`` shapes.
        """
        items = container.get(template.collection or "")
        page_info = container.get("pageInfo")
        if isinstance(items, dict):
            page_info = items.get("pageInfo", page_info)
            items = items.get("nodes")
        if not isinstance(items, list):
            raise DeserializeError(
                f"Response to {template.name} has no '{template.collection}' list"
            )

        items = [item for item in items if item is not None][:per_page]
        try:
            if coerce is not None:
                items = [coerce(item) for item in items]
            page = Page[item_type].model_validate(
                {"pageInfo": page_info or {}, "items": items}
            )
        except ValidationError as e:
            raise DeserializeError(f"Unexpected {template.name} response shape: {e}") from e

        page.bind_client(self)
        return page

    async def _search(
        self,
        kind: EntityKind,
        model: Type[AniListModel],
        term: str,
        page: int,
        per_page: int | None,
    ) -> Page[Any]:
        per_page = self._page_size(page, per_page)
        template = get_template(kind, FetchMode.SEARCH)
        container = await self.request(template, search=term, page=page, perPage=per_page)
        return self._build_page(model, container, template, per_page)

    # ------------------------------------------------------------------
    # Get by id
    # ------------------------------------------------------------------

    async def get_anime(self, id: int | None = None, *, mal_id: int | None = None) -> Anime:
        """
        Get an anime by its AniList id or, failing that, its MyAnimeList id.

        Raises:
            InvalidIdError: Neither id is a positive integer.
        """
        if id is not None:
            return await self._get(EntityKind.ANIME, Anime, _check_id(id), id=id)
        return await self._get(EntityKind.ANIME, Anime, idMal=_check_id(mal_id))

    async def get_manga(self, id: int | None = None, *, mal_id: int | None = None) -> Manga:
        """Get a manga by its AniList id or, failing that, its MyAnimeList id."""
        if id is not None:
            return await self._get(EntityKind.MANGA, Manga, _check_id(id), id=id)
        return await self._get(EntityKind.MANGA, Manga, idMal=_check_id(mal_id))

    async def get_character(self, id: int) -> Character:
        return await self._get(EntityKind.CHARACTER, Character, _check_id(id), id=id)

    get_char = get_character

    async def get_person(self, id: int) -> Person:
        """Get a staff member (voice actor, director, author ...) by id."""
        return await self._get(EntityKind.STAFF, Person, _check_id(id), id=id)

    get_staff = get_person

    async def get_studio(self, id: int) -> Studio:
        return await self._get(EntityKind.STUDIO, Studio, _check_id(id), id=id)

    async def get_user(self, id: int) -> User:
        return await self._get(EntityKind.USER, User, _check_id(id), id=id)

    async def get_user_by_name(self, name: str) -> User:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("User name must be a non-empty string")
        return await self._get(EntityKind.USER, User, name=name.strip())

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search_anime(
        self, term: str, page: int = 1, per_page: int | None = None
    ) -> Page[Anime]:
        return await self._search(EntityKind.ANIME, Anime, term, page, per_page)

    async def search_manga(
        self, term: str, page: int = 1, per_page: int | None = None
    ) -> Page[Manga]:
        return await self._search(EntityKind.MANGA, Manga, term, page, per_page)

    async def search_character(
        self, term: str, page: int = 1, per_page: int | None = None
    ) -> Page[Character]:
        return await self._search(EntityKind.CHARACTER, Character, term, page, per_page)

    async def search_person(
        self, term: str, page: int = 1, per_page: int | None = None
    ) -> Page[Person]:
        return await self._search(EntityKind.STAFF, Person, term, page, per_page)

    search_staff = search_person

    async def search_studio(
        self, term: str, page: int = 1, per_page: int | None = None
    ) -> Page[Studio]:
        return await self._search(EntityKind.STUDIO, Studio, term, page, per_page)

    async def search_user(
        self, term: str, page: int = 1, per_page: int | None = None
    ) -> Page[User]:
        return await self._search(EntityKind.USER, User, term, page, per_page)

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    async def get_studio_media(
        self, studio_id: int, page: int = 1, per_page: int | None = None
    ) -> Page[Anime | Manga]:
        """Get one page of the media a studio worked on, most popular first."""
        studio_id = _check_id(studio_id)
        per_page = self._page_size(page, per_page)
        template = get_template(EntityKind.STUDIO, FetchMode.MEDIA)
        container = await self.request(template, id=studio_id, page=page, perPage=per_page)
        return self._build_page(
            Anime | Manga, container, template, per_page, coerce=coerce_media
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Close the underlying transport (shared with clients from ``with_token``)."""
        await self.transport.close()

    async def __aenter__(self) -> "AniListClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> bool:
        await self.close()
        return False
