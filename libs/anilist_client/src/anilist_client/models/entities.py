"""
AniList entity models.

Every entity can be partially populated: only ``id`` is required, all other
fields are ``None`` when the producing query did not select them. Connections
(``edges``/``nodes``) are flattened into plain lists of partial entities, and
``load_full()`` re-fetches an entity by id.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import AliasChoices, Field, field_validator

from .base import AniListModel, Entity, Page, flatten_connection
from .common import (
    AiringSchedule,
    ColorValue,
    Cover,
    FuzzyDate,
    GenderValue,
    Image,
    LanguageValue,
    Link,
    MediaStats,
    Name,
    NotificationOption,
    StreamingEpisode,
    Tag,
    Title,
    UserStatisticTypes,
)
from .enums import (
    CharacterRole,
    MediaFormat,
    MediaSeason,
    MediaSource,
    MediaStatus,
    MediaType,
    RelationType,
    UserStaffNameLanguage,
    UserTitleLanguage,
)

if TYPE_CHECKING:
    from anilist_client.client import AniListClient


def coerce_media(value: Any) -> Any:
    """Validate a media payload into ``Manga`` or ``Anime`` according to its ``type``."""
    if isinstance(value, Media) or not isinstance(value, dict):
        return value
    if value.get("type") == MediaType.MANGA.value:
        return Manga.model_validate(value)
    return Anime.model_validate(value)


def _coerce_media_list(value: Any, **edge_fields: str) -> Any:
    value = flatten_connection(value, **edge_fields)
    if isinstance(value, list):
        return [coerce_media(item) for item in value]
    return value


# =============================================================================
# Media
# =============================================================================


class Media(Entity):
    """Fields shared by anime and manga."""

    id_mal: int | None = None
    type: MediaType | None = None
    title: Title | None = None
    format: MediaFormat | None = None
    status: MediaStatus | None = None
    description: str | None = None
    start_date: FuzzyDate | None = None
    end_date: FuzzyDate | None = None
    country_of_origin: str | None = None
    is_licensed: bool | None = None
    source: MediaSource | None = None
    hashtag: str | None = None
    updated_at: int | None = None
    cover_image: Cover | None = None
    banner_image: str | None = None
    genres: list[str] | None = None
    synonyms: list[str] | None = None
    average_score: int | None = None
    mean_score: int | None = None
    popularity: int | None = None
    is_locked: bool | None = None
    trending: int | None = None
    favourites: int | None = None
    tags: list[Tag] | None = None
    relations: list[Relation] | None = None
    characters: list[Character] | None = None
    staff: list[Person] | None = None
    is_favourite: bool | None = None
    is_favourite_blocked: bool | None = None
    is_adult: bool | None = None
    external_links: list[Link] | None = None
    site_url: str | None = None
    stats: MediaStats | None = None

    # Edge attributes, set when the media was reached through a character or staff member.
    character_role: CharacterRole | None = None
    staff_role: str | None = None

    @field_validator("relations", mode="before")
    @classmethod
    def _relation_edges(cls, v: Any) -> Any:
        if isinstance(v, dict) and "edges" in v:
            return [
                edge
                for edge in v["edges"] or []
                if isinstance(edge, dict) and isinstance(edge.get("node"), dict)
            ]
        return v

    @field_validator("characters", mode="before")
    @classmethod
    def _character_edges(cls, v: Any) -> Any:
        return flatten_connection(v, role="role")

    @field_validator("staff", mode="before")
    @classmethod
    def _staff_edges(cls, v: Any) -> Any:
        return flatten_connection(v, role="role")

    async def _fetch_full(self, client: AniListClient) -> Media:
        if self.type == MediaType.MANGA:
            return await client.get_manga(self.id)
        return await client.get_anime(self.id)


class Anime(Media):
    """An anime."""

    season: MediaSeason | None = None
    season_year: int | None = None
    season_int: int | None = None
    episodes: int | None = None
    duration: int | None = None
    next_airing_episode: AiringSchedule | None = None
    streaming_episodes: list[StreamingEpisode] | None = None
    studios: list[Studio] | None = None

    @field_validator("studios", mode="before")
    @classmethod
    def _studio_edges(cls, v: Any) -> Any:
        return flatten_connection(v, isMain="isMain")

    async def _fetch_full(self, client: AniListClient) -> Anime:
        return await client.get_anime(self.id)


class Manga(Media):
    """A manga, light novel or one-shot."""

    chapters: int | None = None
    volumes: int | None = None

    async def _fetch_full(self, client: AniListClient) -> Manga:
        return await client.get_manga(self.id)


class Relation(AniListModel):
    """A media related to another one, e.g. its sequel or source material."""

    relation_type: RelationType | None = None
    media: Anime | Manga = Field(validation_alias=AliasChoices("node", "media"))

    @field_validator("media", mode="before")
    @classmethod
    def _media_by_type(cls, v: Any) -> Any:
        return coerce_media(v)

    @property
    def id(self) -> int:
        return self.media.id

    async def load_full(self) -> Relation:
        """Return a copy of this relation with its media fully loaded."""
        media = await self.media.load_full()
        return self.model_copy(update={"media": media})


# =============================================================================
# Characters & staff
# =============================================================================


class Character(Entity):
    """A character appearing in anime or manga."""

    name: Name | None = None
    image: Image | None = None
    description: str | None = None
    gender: GenderValue = None
    date_of_birth: FuzzyDate | None = None
    age: str | None = None
    blood_type: str | None = None
    is_favourite: bool | None = None
    is_favourite_blocked: bool | None = None
    favourites: int | None = None
    site_url: str | None = None
    media: list[Anime | Manga] | None = None

    # Edge attribute, set when the character was reached through a media or staff member.
    role: CharacterRole | None = None

    @field_validator("media", mode="before")
    @classmethod
    def _media_edges(cls, v: Any) -> Any:
        return _coerce_media_list(v, characterRole="characterRole")

    async def _fetch_full(self, client: AniListClient) -> Character:
        return await client.get_character(self.id)


class Person(Entity):
    """A staff member: voice actor, director, author, ..."""

    name: Name | None = None
    language_v2: LanguageValue = None
    image: Image | None = None
    description: str | None = None
    primary_occupations: list[str] | None = None
    gender: GenderValue = None
    date_of_birth: FuzzyDate | None = None
    date_of_death: FuzzyDate | None = None
    age: int | None = None
    years_active: list[int] | None = None
    home_town: str | None = None
    blood_type: str | None = None
    is_favourite: bool | None = None
    is_favourite_blocked: bool | None = None
    favourites: int | None = None
    site_url: str | None = None
    staff_media: list[Anime | Manga] | None = None
    characters: list[Character] | None = None

    # Edge attribute, set when the person was reached through a media.
    role: str | None = None

    @field_validator("staff_media", mode="before")
    @classmethod
    def _media_edges(cls, v: Any) -> Any:
        return _coerce_media_list(v, staffRole="staffRole")

    @field_validator("characters", mode="before")
    @classmethod
    def _character_edges(cls, v: Any) -> Any:
        return flatten_connection(v, role="role")

    async def _fetch_full(self, client: AniListClient) -> Person:
        return await client.get_person(self.id)


# =============================================================================
# Studios
# =============================================================================


class Studio(Entity):
    """An animation studio or production company."""

    name: str | None = None
    is_animation_studio: bool | None = None
    site_url: str | None = None
    is_favourite: bool | None = None
    favourites: int | None = None
    media: list[Anime | Manga] | None = None

    # Edge attribute, set when the studio was reached through an anime.
    is_main: bool | None = None

    @field_validator("media", mode="before")
    @classmethod
    def _media_nodes(cls, v: Any) -> Any:
        return _coerce_media_list(v)

    async def _fetch_full(self, client: AniListClient) -> Studio:
        return await client.get_studio(self.id)

    async def get_medias(
        self, page: int = 1, per_page: int | None = None
    ) -> Page[Anime | Manga]:
        """Fetch one page of the media this studio worked on, most popular first."""
        async with self._client_scope() as client:
            result = await client.get_studio_media(self.id, page=page, per_page=per_page)
        if client is not self._client:
            result.bind_client(None)
        return result


# =============================================================================
# Users
# =============================================================================


class UserOptions(AniListModel):
    title_language: UserTitleLanguage | None = None
    display_adult_content: bool | None = None
    airing_notifications: bool | None = None
    profile_color: ColorValue = None
    timezone: str | None = None
    activity_merge_time: int | None = None
    staff_name_language: UserStaffNameLanguage | None = None
    restrict_messages_to_following: bool | None = None
    notification_options: list[NotificationOption] | None = None


class MediaListOptions(AniListModel):
    score_format: str | None = None
    row_order: str | None = None


class Favourites(AniListModel):
    """A user's favourite media, characters, staff and studios."""

    anime: list[Anime] | None = None
    manga: list[Manga] | None = None
    characters: list[Character] | None = None
    staff: list[Person] | None = None
    studios: list[Studio] | None = None

    @field_validator("anime", "manga", "characters", "staff", "studios", mode="before")
    @classmethod
    def _connection_nodes(cls, v: Any) -> Any:
        return flatten_connection(v)


class User(Entity):
    """An AniList user profile."""

    name: str | None = None
    about: str | None = None
    avatar: Image | None = None
    banner_image: str | None = None
    donator_tier: int | None = None
    donator_badge: str | None = None
    is_following: bool | None = None
    is_follower: bool | None = None
    is_blocked: bool | None = None
    unread_notification_count: int | None = None
    created_at: int | None = None
    updated_at: int | None = None
    options: UserOptions | None = None
    media_list_options: MediaListOptions | None = None
    statistics: UserStatisticTypes | None = None
    favourites: Favourites | None = None
    site_url: str | None = None

    async def _fetch_full(self, client: AniListClient) -> User:
        return await client.get_user(self.id)


for _model in (Media, Anime, Manga, Relation, Character, Person, Studio, Favourites, User):
    _model.model_rebuild()
