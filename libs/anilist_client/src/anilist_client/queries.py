"""
Static GraphQL documents for the AniList API.

Every document is a module-level constant composed from fixed field selections.
Caller input only ever reaches the API as GraphQL variables, bound through
``QueryTemplate.bind``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from .exceptions import QueryNotFoundError, QueryVariableError


class EntityKind(str, Enum):
    """Kinds of AniList entities the client can fetch."""

    ANIME = "anime"
    MANGA = "manga"
    CHARACTER = "character"
    STAFF = "staff"
    STUDIO = "studio"
    USER = "user"


class FetchMode(str, Enum):
    """How an entity is looked up."""

    GET = "get"
    SEARCH = "search"
    MEDIA = "media"


@dataclass(frozen=True)
class QueryTemplate:
    """A named GraphQL document with its declared variables and their defaults.

    Attributes:
        name: Catalog name, e.g. ``search_anime``.
        document: GraphQL query text.
        root: Top-level field of ``data`` holding the result (``Media``, ``Page`` ...).
        variables: Variable names the document declares.
        defaults: Default values applied by ``bind``.
        collection: For paged queries, the list field inside ``root``.
    """

    name: str
    document: str
    root: str
    variables: tuple[str, ...]
    defaults: Mapping[str, Any] = field(default_factory=dict)
    collection: str | None = None

    @property
    def is_paged(self) -> bool:
        return self.collection is not None

    def bind(self, **values: Any) -> dict[str, Any]:
        """Merge ``values`` over the defaults and drop unset (None) variables."""
        unknown = sorted(set(values) - set(self.variables))
        if unknown:
            raise QueryVariableError(self.name, unknown)

        bound = {**self.defaults, **values}
        return {key: value for key, value in bound.items() if value is not None}


# =============================================================================
# Field selections
# =============================================================================

PAGE_INFO_FIELDS = """
    pageInfo {
      total
      perPage
      currentPage
      lastPage
      hasNextPage
    }
"""

TITLE_FIELDS = """
    title {
      romaji
      english
      native
      userPreferred
    }
"""

COVER_FIELDS = """
    coverImage {
      extraLarge
      large
      medium
      color
    }
"""

DATE_FIELDS = "{ year month day }"

NAME_FIELDS = """
    name {
      first
      middle
      last
      full
      native
      alternative
      alternativeSpoiler
      userPreferred
    }
"""

MEDIA_SUMMARY_FIELDS = f"""
    id
    idMal
    type
    {TITLE_FIELDS}
    format
    status
    {COVER_FIELDS}
    averageScore
    isAdult
    siteUrl
"""

CHARACTER_SUMMARY_FIELDS = f"""
    id
    {NAME_FIELDS}
    image {{ large medium }}
    favourites
    siteUrl
"""

STAFF_SUMMARY_FIELDS = f"""
    id
    {NAME_FIELDS}
    languageV2
    image {{ large medium }}
    primaryOccupations
    favourites
    siteUrl
"""

STUDIO_SUMMARY_FIELDS = """
    id
    name
    isAnimationStudio
    favourites
    siteUrl
"""

USER_SUMMARY_FIELDS = """
    id
    name
    avatar { large medium }
    bannerImage
    siteUrl
"""

MEDIA_FIELDS = f"""
    {MEDIA_SUMMARY_FIELDS}
    description(asHtml: false)
    startDate {DATE_FIELDS}
    endDate {DATE_FIELDS}
    season
    seasonYear
    seasonInt
    episodes
    duration
    chapters
    volumes
    countryOfOrigin
    isLicensed
    source
    hashtag
    updatedAt
    bannerImage
    genres
    synonyms
    meanScore
    popularity
    isLocked
    trending
    favourites
    isFavourite
    isFavouriteBlocked
    tags {{
      id
      name
      description
      category
      rank
      isGeneralSpoiler
      isMediaSpoiler
      isAdult
      userId
    }}
    relations {{
      edges {{
        relationType
        node {{
          {MEDIA_SUMMARY_FIELDS}
        }}
      }}
    }}
    characters(sort: ROLE) {{
      edges {{
        role
        node {{
          {CHARACTER_SUMMARY_FIELDS}
        }}
      }}
    }}
    staff(sort: RELEVANCE) {{
      edges {{
        role
        node {{
          {STAFF_SUMMARY_FIELDS}
        }}
      }}
    }}
    studios {{
      edges {{
        isMain
        node {{
          {STUDIO_SUMMARY_FIELDS}
        }}
      }}
    }}
    nextAiringEpisode {{
      id
      episode
      airingAt
      timeUntilAiring
    }}
    externalLinks {{
      id
      url
      site
      siteId
      type
      language
      color
      icon
      notes
      isDisabled
    }}
    streamingEpisodes {{
      title
      thumbnail
      url
      site
    }}
    stats {{
      scoreDistribution {{ score amount }}
      statusDistribution {{ status amount }}
    }}
"""

CHARACTER_FIELDS = f"""
    {CHARACTER_SUMMARY_FIELDS}
    description(asHtml: false)
    gender
    dateOfBirth {DATE_FIELDS}
    age
    bloodType
    isFavourite
    isFavouriteBlocked
    media(sort: POPULARITY_DESC) {{
      edges {{
        characterRole
        node {{
          {MEDIA_SUMMARY_FIELDS}
        }}
      }}
    }}
"""

STAFF_FIELDS = f"""
    {STAFF_SUMMARY_FIELDS}
    description(asHtml: false)
    gender
    dateOfBirth {DATE_FIELDS}
    dateOfDeath {DATE_FIELDS}
    age
    yearsActive
    homeTown
    bloodType
    isFavourite
    isFavouriteBlocked
    staffMedia(sort: POPULARITY_DESC) {{
      edges {{
        staffRole
        node {{
          {MEDIA_SUMMARY_FIELDS}
        }}
      }}
    }}
    characters(sort: FAVOURITES_DESC) {{
      edges {{
        role
        node {{
          {CHARACTER_SUMMARY_FIELDS}
        }}
      }}
    }}
"""

STUDIO_FIELDS = f"""
    {STUDIO_SUMMARY_FIELDS}
    isFavourite
    media(sort: POPULARITY_DESC, isMain: true) {{
      nodes {{
        {MEDIA_SUMMARY_FIELDS}
      }}
    }}
"""

USER_STATISTICS_FIELDS = """
      count
      meanScore
      standardDeviation
      minutesWatched
      episodesWatched
      chaptersRead
      volumesRead
      formats { count minutesWatched chaptersRead meanScore mediaIds format }
      statuses { count minutesWatched chaptersRead meanScore mediaIds status }
"""

USER_FIELDS = f"""
    {USER_SUMMARY_FIELDS}
    about(asHtml: false)
    donatorTier
    donatorBadge
    isFollowing
    isFollower
    isBlocked
    unreadNotificationCount
    createdAt
    updatedAt
    options {{
      titleLanguage
      displayAdultContent
      airingNotifications
      profileColor
      timezone
      activityMergeTime
      staffNameLanguage
      restrictMessagesToFollowing
      notificationOptions {{ type enabled }}
    }}
    mediaListOptions {{
      scoreFormat
      rowOrder
    }}
    statistics {{
      anime {{ {USER_STATISTICS_FIELDS} }}
      manga {{ {USER_STATISTICS_FIELDS} }}
    }}
    favourites {{
      anime {{ nodes {{ {MEDIA_SUMMARY_FIELDS} }} }}
      manga {{ nodes {{ {MEDIA_SUMMARY_FIELDS} }} }}
      characters {{ nodes {{ {CHARACTER_SUMMARY_FIELDS} }} }}
      staff {{ nodes {{ {STAFF_SUMMARY_FIELDS} }} }}
      studios {{ nodes {{ {STUDIO_SUMMARY_FIELDS} }} }}
    }}
"""


# =============================================================================
# Documents
# =============================================================================

GET_ANIME = f"""
query ($id: Int, $idMal: Int) {{
  Media(id: $id, idMal: $idMal, type: ANIME) {{
    {MEDIA_FIELDS}
  }}
}}
"""

GET_MANGA = f"""
query ($id: Int, $idMal: Int) {{
  Media(id: $id, idMal: $idMal, type: MANGA) {{
    {MEDIA_FIELDS}
  }}
}}
"""

GET_CHARACTER = f"""
query ($id: Int) {{
  Character(id: $id) {{
    {CHARACTER_FIELDS}
  }}
}}
"""

GET_STAFF = f"""
query ($id: Int) {{
  Staff(id: $id) {{
    {STAFF_FIELDS}
  }}
}}
"""

GET_STUDIO = f"""
query ($id: Int) {{
  Studio(id: $id) {{
    {STUDIO_FIELDS}
  }}
}}
"""

GET_USER = f"""
query ($id: Int, $name: String) {{
  User(id: $id, name: $name) {{
    {USER_FIELDS}
  }}
}}
"""

SEARCH_ANIME = f"""
query ($search: String, $page: Int, $perPage: Int) {{
  Page(page: $page, perPage: $perPage) {{
    {PAGE_INFO_FIELDS}
    media(search: $search, type: ANIME, sort: SEARCH_MATCH) {{
      {MEDIA_SUMMARY_FIELDS}
    }}
  }}
}}
"""

SEARCH_MANGA = f"""
query ($search: String, $page: Int, $perPage: Int) {{
  Page(page: $page, perPage: $perPage) {{
    {PAGE_INFO_FIELDS}
    media(search: $search, type: MANGA, sort: SEARCH_MATCH) {{
      {MEDIA_SUMMARY_FIELDS}
    }}
  }}
}}
"""

SEARCH_CHARACTER = f"""
query ($search: String, $page: Int, $perPage: Int) {{
  Page(page: $page, perPage: $perPage) {{
    {PAGE_INFO_FIELDS}
    characters(search: $search, sort: SEARCH_MATCH) {{
      {CHARACTER_SUMMARY_FIELDS}
    }}
  }}
}}
"""

SEARCH_STAFF = f"""
query ($search: String, $page: Int, $perPage: Int) {{
  Page(page: $page, perPage: $perPage) {{
    {PAGE_INFO_FIELDS}
    staff(search: $search, sort: SEARCH_MATCH) {{
      {STAFF_SUMMARY_FIELDS}
    }}
  }}
}}
"""

SEARCH_STUDIO = f"""
query ($search: String, $page: Int, $perPage: Int) {{
  Page(page: $page, perPage: $perPage) {{
    {PAGE_INFO_FIELDS}
    studios(search: $search, sort: SEARCH_MATCH) {{
      {STUDIO_SUMMARY_FIELDS}
    }}
  }}
}}
"""

SEARCH_USER = f"""
query ($search: String, $page: Int, $perPage: Int) {{
  Page(page: $page, perPage: $perPage) {{
    {PAGE_INFO_FIELDS}
    users(search: $search, sort: SEARCH_MATCH) {{
      {USER_SUMMARY_FIELDS}
    }}
  }}
}}
"""

STUDIO_MEDIA = f"""
query ($id: Int, $page: Int, $perPage: Int) {{
  Studio(id: $id) {{
    id
    media(page: $page, perPage: $perPage, sort: POPULARITY_DESC) {{
      {PAGE_INFO_FIELDS}
      nodes {{
        {MEDIA_SUMMARY_FIELDS}
      }}
    }}
  }}
}}
"""


# =============================================================================
# Catalog
# =============================================================================

_SEARCH_VARIABLES = ("search", "page", "perPage")
_SEARCH_DEFAULTS = MappingProxyType({"page": 1, "perPage": 10})


def _get(name: str, document: str, root: str, *variables: str) -> QueryTemplate:
    return QueryTemplate(name=name, document=document, root=root, variables=variables)


def _search(name: str, document: str, collection: str) -> QueryTemplate:
    return QueryTemplate(
        name=name,
        document=document,
        root="Page",
        variables=_SEARCH_VARIABLES,
        defaults=_SEARCH_DEFAULTS,
        collection=collection,
    )


CATALOG: Mapping[tuple[EntityKind, FetchMode], QueryTemplate] = MappingProxyType(
    {
        (EntityKind.ANIME, FetchMode.GET): _get("get_anime", GET_ANIME, "Media", "id", "idMal"),
        (EntityKind.MANGA, FetchMode.GET): _get("get_manga", GET_MANGA, "Media", "id", "idMal"),
        (EntityKind.CHARACTER, FetchMode.GET): _get(
            "get_character", GET_CHARACTER, "Character", "id"
        ),
        (EntityKind.STAFF, FetchMode.GET): _get("get_staff", GET_STAFF, "Staff", "id"),
        (EntityKind.STUDIO, FetchMode.GET): _get("get_studio", GET_STUDIO, "Studio", "id"),
        (EntityKind.USER, FetchMode.GET): _get("get_user", GET_USER, "User", "id", "name"),
        (EntityKind.ANIME, FetchMode.SEARCH): _search("search_anime", SEARCH_ANIME, "media"),
        (EntityKind.MANGA, FetchMode.SEARCH): _search("search_manga", SEARCH_MANGA, "media"),
        (EntityKind.CHARACTER, FetchMode.SEARCH): _search(
            "search_character", SEARCH_CHARACTER, "characters"
        ),
        (EntityKind.STAFF, FetchMode.SEARCH): _search("search_staff", SEARCH_STAFF, "staff"),
        (EntityKind.STUDIO, FetchMode.SEARCH): _search(
            "search_studio", SEARCH_STUDIO, "studios"
        ),
        (EntityKind.USER, FetchMode.SEARCH): _search("search_user", SEARCH_USER, "users"),
        (EntityKind.STUDIO, FetchMode.MEDIA): QueryTemplate(
            name="studio_media",
            document=STUDIO_MEDIA,
            root="Studio",
            variables=("id", "page", "perPage"),
            defaults=_SEARCH_DEFAULTS,
            collection="media",
        ),
    }
)


def get_template(kind: EntityKind | str, mode: FetchMode | str) -> QueryTemplate:
    """Look up the query template for an entity kind and fetch mode.

    Raises:
        QueryNotFoundError: If the pair is not in the catalog.
    """
    try:
        return CATALOG[(EntityKind(kind), FetchMode(mode))]
    except (KeyError, ValueError) as e:
        raise QueryNotFoundError(
            getattr(kind, "value", kind), getattr(mode, "value", mode)
        ) from e
