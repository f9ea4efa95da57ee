"""Shared building blocks for AniList response models."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterator, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from anilist_client.client import AniListClient

T = TypeVar("T")
EntityT = TypeVar("EntityT", bound="Entity")


class AniListModel(BaseModel):
    """Base model for AniList payloads.

    Field names are snake_case in Python and camelCase on the wire. Unknown keys
    are ignored so that wider selections never break deserialization.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        use_enum_values=False,
    )

    _client: AniListClient | None = PrivateAttr(default=None)

    def bind_client(self, client: AniListClient | None) -> None:
        """Attach ``client`` to this model and every nested model."""
        self._client = client
        for name in type(self).model_fields:
            _bind_value(getattr(self, name), client)


def _bind_value(value: Any, client: AniListClient | None) -> None:
    if isinstance(value, AniListModel):
        value.bind_client(client)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _bind_value(item, client)


def flatten_connection(value: Any, **edge_fields: str) -> Any:
    """
    Flatten a GraphQL connection into a list of node payloads.

    ``{"edges": [{"node": {...}, "role": "MAIN"}]}`` becomes ``[{..., "role": "MAIN"}]``;
    ``edge_fields`` maps edge keys to the node key they are copied to.
    ``{"nodes": [...]}`` becomes the bare list. Anything else is returned unchanged.
    """
    if not isinstance(value, dict):
        return value

    if "edges" in value:
        nodes = []
        for edge in value["edges"] or []:
            if not isinstance(edge, dict) or not isinstance(edge.get("node"), dict):
                continue
            node = dict(edge["node"])
            for edge_key, node_key in edge_fields.items():
                if edge.get(edge_key) is not None:
                    node[node_key] = edge[edge_key]
            nodes.append(node)
        return nodes

    if "nodes" in value:
        return [node for node in value["nodes"] or [] if node is not None]

    return value


class Entity(AniListModel):
    """An AniList entity with a stable, service-assigned id."""

    id: int = Field(frozen=True)

    _is_full_loaded: bool = PrivateAttr(default=False)

    @property
    def is_full_loaded(self) -> bool:
        return self._is_full_loaded

    def mark_full_loaded(self, client: AniListClient | None = None) -> None:
        self._is_full_loaded = True
        if client is not None:
            self.bind_client(client)

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[AniListClient]:
        """Yield the bound client, or a temporary default client closed on exit."""
        if self._client is not None:
            yield self._client
            return

        from anilist_client.client import AniListClient

        async with AniListClient() as client:
            yield client

    def merge(self: EntityT, fresh: EntityT) -> EntityT:
        """
        Return a copy of ``self`` updated with the fields ``fresh`` actually carries.

        Fields absent from ``fresh`` keep their current values. ``id`` never changes.
        """
        if fresh.id != self.id:
            raise ValueError(f"Cannot merge entity {fresh.id} into entity {self.id}")

        if not isinstance(fresh, type(self)):
            merged = fresh.model_copy()
        else:
            update = {
                name: getattr(fresh, name)
                for name in fresh.model_fields_set
                if name in type(fresh).model_fields and name != "id"
            }
            merged = self.model_copy(update=update)
        merged._is_full_loaded = fresh.is_full_loaded
        merged.bind_client(fresh._client or self._client)
        return merged

    async def _fetch_full(self: EntityT, client: AniListClient) -> EntityT:
        raise NotImplementedError

    async def load_full(self: EntityT) -> EntityT:
        """
        Fetch the full record for this entity and merge it over the partial one.

        Returns:
            A new instance with every field of the full response; fields the
            response omits keep their partial values. Already fully loaded
            entities are returned unchanged without a request.
        """
        if self.is_full_loaded:
            return self
        async with self._client_scope() as client:
            fresh = await self._fetch_full(client)
        if client is not self._client:
            fresh.bind_client(None)
        return self.merge(fresh)


class PageInfo(AniListModel):
    """Pagination metadata of a paged AniList query."""

    total: int | None = None
    per_page: int | None = None
    current_page: int | None = None
    last_page: int | None = None
    has_next_page: bool | None = None


class Page(AniListModel, Generic[T]):
    """One page of results from a search or listing query."""

    page_info: PageInfo = Field(default_factory=PageInfo)
    items: list[T] = Field(default_factory=list)

    def __iter__(self):  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def has_next_page(self) -> bool:
        return bool(self.page_info.has_next_page)
