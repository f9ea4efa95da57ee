"""Typed models for AniList GraphQL responses."""

from .base import AniListModel, Entity, Page, PageInfo
from .common import (
    AiringSchedule,
    Cover,
    FuzzyDate,
    Image,
    Link,
    MediaStats,
    Name,
    NotificationOption,
    StreamingEpisode,
    Tag,
    Title,
    UserStatistics,
    UserStatisticTypes,
    hex_color,
)
from .entities import (
    Anime,
    Character,
    Favourites,
    Manga,
    Media,
    MediaListOptions,
    Person,
    Relation,
    Studio,
    User,
    UserOptions,
)
from .enums import (
    CharacterRole,
    Color,
    ExternalLinkType,
    Gender,
    Language,
    MediaFormat,
    MediaListStatus,
    MediaSeason,
    MediaSource,
    MediaStatus,
    MediaType,
    NotificationType,
    RelationType,
    UserStaffNameLanguage,
    UserTitleLanguage,
)

__all__ = [
    "AiringSchedule",
    "AniListModel",
    "Anime",
    "Character",
    "CharacterRole",
    "Color",
    "Cover",
    "Entity",
    "ExternalLinkType",
    "Favourites",
    "FuzzyDate",
    "Gender",
    "Image",
    "Language",
    "Link",
    "Manga",
    "Media",
    "MediaFormat",
    "MediaListOptions",
    "MediaListStatus",
    "MediaSeason",
    "MediaSource",
    "MediaStats",
    "MediaStatus",
    "MediaType",
    "Name",
    "NotificationOption",
    "NotificationType",
    "Page",
    "PageInfo",
    "Person",
    "Relation",
    "RelationType",
    "StreamingEpisode",
    "Studio",
    "Tag",
    "Title",
    "User",
    "UserOptions",
    "UserStaffNameLanguage",
    "UserStatisticTypes",
    "UserStatistics",
    "UserTitleLanguage",
    "hex_color",
]
