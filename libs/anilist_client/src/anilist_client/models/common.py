"""Value types shared by several AniList entities."""

from __future__ import annotations

import datetime as dt
from typing import Annotated, Union

from pydantic import AliasChoices, Field

from .base import AniListModel
from .enums import (
    Color,
    ExternalLinkType,
    Gender,
    Language,
    MediaFormat,
    MediaListStatus,
    NotificationType,
)

# Known values become enum members; anything else is kept as the raw string.
ColorValue = Annotated[Union[Color, str, None], Field(union_mode="left_to_right")]
GenderValue = Annotated[Union[Gender, str, None], Field(union_mode="left_to_right")]
LanguageValue = Annotated[Union[Language, str, None], Field(union_mode="left_to_right")]


def hex_color(value: Color | str | None) -> str | None:
    """Return ``value`` if it is a custom colour such as ``#3db4f2``, None for presets."""
    if value is None or isinstance(value, Color):
        return None
    return value


_DATE_PLACEHOLDERS = (
    ("year", ("{year}", "{yyyy}", "{y}", "{YEAR}", "{YYYY}", "{Y}")),
    ("year2", ("{yy}", "{YY}")),
    ("month", ("{month}", "{mon}", "{mm}", "{MONTH}", "{MON}", "{MM}")),
    ("month1", ("{m}", "{M}")),
    ("day", ("{day}", "{dd}", "{DAY}", "{DD}")),
    ("day1", ("{d}", "{D}")),
)


class Title(AniListModel):
    """Media title in its different languages."""

    romaji: str | None = None
    english: str | None = None
    native: str | None = None
    user_preferred: str | None = None

    def is_empty(self) -> bool:
        return not any((self.romaji, self.english, self.native, self.user_preferred))

    def __str__(self) -> str:
        return self.user_preferred or self.romaji or self.english or self.native or ""


class FuzzyDate(AniListModel):
    """A date where any of year, month or day may be unknown."""

    year: int | None = None
    month: int | None = None
    day: int | None = None

    @classmethod
    def today(cls) -> FuzzyDate:
        return cls.from_date(dt.date.today())

    @classmethod
    def from_date(cls, value: dt.date) -> FuzzyDate:
        return cls(year=value.year, month=value.month, day=value.day)

    def is_valid(self) -> bool:
        """Whether year, month and day are all known."""
        return self.year is not None and self.month is not None and self.day is not None

    def as_date(self) -> dt.date | None:
        """Return a ``datetime.date``, or None if any part is unknown or out of range."""
        if not self.is_valid():
            return None
        try:
            return dt.date(self.year, self.month, self.day)  # type: ignore[arg-type]
        except ValueError:
            return None

    def format(self, pattern: str) -> str:
        """
        Format the date using ``{yyyy}``/``{yy}``, ``{mm}``/``{m}`` and ``{dd}``/``{d}``
        style placeholders (upper-case and long forms such as ``{year}`` also work).

        Placeholders for unknown parts are left in place.

        Example:
            >>> FuzzyDate(year=2023, month=10, day=5).format("{yyyy}-{mm}-{dd}")
            '2023-10-05'
        """
        values = {}
        if self.year is not None:
            values["year"] = str(self.year)
            values["year2"] = f"{self.year % 100:02d}"
        if self.month is not None:
            values["month"] = f"{self.month:02d}"
            values["month1"] = str(self.month)
        if self.day is not None:
            values["day"] = f"{self.day:02d}"
            values["day1"] = str(self.day)

        for key, placeholders in _DATE_PLACEHOLDERS:
            if key not in values:
                continue
            for placeholder in placeholders:
                pattern = pattern.replace(placeholder, values[key])
        return pattern

    def __str__(self) -> str:
        year = "" if self.year is None else str(self.year)
        month = "" if self.month is None else f"{self.month:02d}"
        day = "" if self.day is None else f"{self.day:02d}"
        return f"{year}-{month}-{day}"


class Image(AniListModel):
    """Character, staff or user image in two sizes."""

    large: str | None = None
    medium: str | None = None

    def largest(self) -> str | None:
        return self.large or self.medium


class Cover(AniListModel):
    """Media cover image in several sizes plus its dominant colour."""

    extra_large: str | None = None
    large: str | None = None
    medium: str | None = None
    color: ColorValue = None

    def largest(self) -> str | None:
        return self.extra_large or self.large or self.medium


class Name(AniListModel):
    """Name of a character or staff member."""

    first: str | None = None
    middle: str | None = None
    last: str | None = None
    full: str | None = None
    native: str | None = None
    alternative: list[str] | None = None
    alternative_spoiler: list[str] | None = None
    user_preferred: str | None = None

    def __str__(self) -> str:
        if self.user_preferred or self.full:
            return self.user_preferred or self.full or ""
        return " ".join(part for part in (self.first, self.middle, self.last) if part)


class Tag(AniListModel):
    """A tag describing elements and themes of a media."""

    id: int
    name: str | None = None
    description: str | None = None
    category: str | None = None
    rank: int | None = None
    is_general_spoiler: bool | None = None
    is_media_spoiler: bool | None = None
    is_adult: bool | None = None
    user_id: int | None = None


class Link(AniListModel):
    """External or streaming link of a media."""

    id: int | None = None
    url: str | None = None
    site: str | None = None
    site_id: int | None = None
    type: ExternalLinkType | None = None
    language: LanguageValue = None
    color: ColorValue = None
    icon: str | None = None
    notes: str | None = None
    is_disabled: bool | None = None


class StreamingEpisode(AniListModel):
    title: str | None = None
    thumbnail: str | None = None
    url: str | None = None
    site: str | None = None


class AiringSchedule(AniListModel):
    """Next airing episode of an anime."""

    id: int | None = None
    episode: int | None = None
    airing_at: int | None = None
    time_until_airing: int | None = None

    @property
    def airs_at(self) -> dt.datetime | None:
        if self.airing_at is None:
            return None
        return dt.datetime.fromtimestamp(self.airing_at, tz=dt.timezone.utc)


class ScoreDistribution(AniListModel):
    score: int | None = None
    amount: int | None = None


class StatusDistribution(AniListModel):
    status: MediaListStatus | None = None
    amount: int | None = None


class MediaStats(AniListModel):
    """Score and list-status distributions of a media."""

    score_distribution: list[ScoreDistribution] | None = None
    status_distribution: list[StatusDistribution] | None = None


class UserFormatStatistic(AniListModel):
    count: int | None = None
    minutes_watched: int | None = None
    chapters_read: int | None = None
    mean_score: float | None = None
    media_ids: list[int] = Field(default_factory=list)
    format: MediaFormat | None = None


class UserStatusStatistic(AniListModel):
    count: int | None = None
    minutes_watched: int | None = None
    chapters_read: int | None = None
    mean_score: float | None = None
    media_ids: list[int] = Field(default_factory=list)
    status: MediaListStatus | None = None


class UserStatistics(AniListModel):
    """List statistics of a user for one media type."""

    count: int | None = None
    mean_score: float | None = None
    standard_deviation: float | None = None
    minutes_watched: int | None = None
    episodes_watched: int | None = None
    chapters_read: int | None = None
    volumes_read: int | None = None
    formats: list[UserFormatStatistic] | None = None
    statuses: list[UserStatusStatistic] | None = None


class UserStatisticTypes(AniListModel):
    anime: UserStatistics | None = None
    manga: UserStatistics | None = None



class NotificationOption(AniListModel):
    """Whether a user receives one kind of notification."""

    notification_type: NotificationType | None = Field(
        default=None, validation_alias=AliasChoices("type", "notificationType")
    )
    enabled: bool | None = None
