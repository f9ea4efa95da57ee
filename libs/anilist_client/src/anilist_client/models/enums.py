"""Enumerations returned by the AniList API."""

from enum import Enum


class AniListEnum(str, Enum):
    """String enum whose values are AniList's SCREAMING_SNAKE_CASE names."""

    @property
    def label(self) -> str:
        """Human readable name, e.g. ``NOT_YET_RELEASED`` -> ``Not Yet Released``."""
        return self.value.replace("_", " ").title()

    def __str__(self) -> str:
        return self.label


class MediaType(AniListEnum):
    ANIME = "ANIME"
    MANGA = "MANGA"


class MediaFormat(AniListEnum):
    """The format the media was released in."""

    TV = "TV"
    TV_SHORT = "TV_SHORT"
    MOVIE = "MOVIE"
    SPECIAL = "SPECIAL"
    OVA = "OVA"
    ONA = "ONA"
    MUSIC = "MUSIC"
    MANGA = "MANGA"
    NOVEL = "NOVEL"
    ONE_SHOT = "ONE_SHOT"

    @property
    def label(self) -> str:
        return _FORMAT_LABELS.get(self.value, super().label)

    @property
    def summary(self) -> str:
        return _FORMAT_SUMMARIES[self.value]


_FORMAT_LABELS = {
    "TV": "TV",
    "TV_SHORT": "TV Short",
    "OVA": "OVA",
    "ONA": "ONA",
    "ONE_SHOT": "One-Shot",
}

_FORMAT_SUMMARIES = {
    "TV": "Anime broadcast on television",
    "TV_SHORT": "Anime which are under 15 minutes in length and broadcast on television",
    "MOVIE": "Anime movies with a theatrical release",
    "SPECIAL": "Special episodes that have been included in DVD/Blu-ray releases, "
    "picture dramas, pilots, etc",
    "OVA": "(Original Video Animation) Anime that have been released directly on "
    "DVD/Blu-ray without originally going through a theatrical release or "
    "television broadcast",
    "ONA": "(Original Net Animation) Anime that have been originally released online "
    "or are only available through streaming services.",
    "MUSIC": "Short anime released as a music video",
    "MANGA": "Professionally published manga with more than one chapter",
    "NOVEL": "Written books released as a series of light novels",
    "ONE_SHOT": "Manga with just one chapter",
}


class MediaStatus(AniListEnum):
    """The current releasing status of the media."""

    FINISHED = "FINISHED"
    RELEASING = "RELEASING"
    NOT_YET_RELEASED = "NOT_YET_RELEASED"
    CANCELLED = "CANCELLED"
    HIATUS = "HIATUS"

    @property
    def summary(self) -> str:
        return _STATUS_SUMMARIES[self.value]


_STATUS_SUMMARIES = {
    "FINISHED": "Has completed and is no longer being released.",
    "RELEASING": "Currently releasing.",
    "NOT_YET_RELEASED": "To be released at a later date.",
    "CANCELLED": "Ended before the work could be finished.",
    "HIATUS": "Is currently paused from releasing and will resume at a later date.",
}


class MediaListStatus(AniListEnum):
    """Status of a media entry on a user's list."""

    CURRENT = "CURRENT"
    PLANNING = "PLANNING"
    COMPLETED = "COMPLETED"
    DROPPED = "DROPPED"
    PAUSED = "PAUSED"
    REPEATING = "REPEATING"


class MediaSeason(AniListEnum):
    WINTER = "WINTER"
    SPRING = "SPRING"
    SUMMER = "SUMMER"
    FALL = "FALL"


class MediaSource(AniListEnum):
    """Source material the media was adapted from."""

    ORIGINAL = "ORIGINAL"
    MANGA = "MANGA"
    LIGHT_NOVEL = "LIGHT_NOVEL"
    VISUAL_NOVEL = "VISUAL_NOVEL"
    VIDEO_GAME = "VIDEO_GAME"
    OTHER = "OTHER"
    NOVEL = "NOVEL"
    DOUJINSHI = "DOUJINSHI"
    ANIME = "ANIME"
    WEB_NOVEL = "WEB_NOVEL"
    LIVE_ACTION = "LIVE_ACTION"
    GAME = "GAME"
    COMIC = "COMIC"
    MULTIMEDIA_PROJECT = "MULTIMEDIA_PROJECT"
    PICTURE_BOOK = "PICTURE_BOOK"


class RelationType(AniListEnum):
    """Type of relation between two media."""

    ADAPTATION = "ADAPTATION"
    PREQUEL = "PREQUEL"
    SEQUEL = "SEQUEL"
    PARENT = "PARENT"
    SIDE_STORY = "SIDE_STORY"
    CHARACTER = "CHARACTER"
    SUMMARY = "SUMMARY"
    ALTERNATIVE = "ALTERNATIVE"
    SPIN_OFF = "SPIN_OFF"
    OTHER = "OTHER"
    SOURCE = "SOURCE"
    COMPILATION = "COMPILATION"
    CONTAINS = "CONTAINS"


class CharacterRole(AniListEnum):
    MAIN = "MAIN"
    SUPPORTING = "SUPPORTING"
    BACKGROUND = "BACKGROUND"


class ExternalLinkType(AniListEnum):
    INFO = "INFO"
    STREAMING = "STREAMING"
    SOCIAL = "SOCIAL"


class UserTitleLanguage(AniListEnum):
    ROMAJI = "ROMAJI"
    ENGLISH = "ENGLISH"
    NATIVE = "NATIVE"
    ROMAJI_STYLISED = "ROMAJI_STYLISED"
    ENGLISH_STYLISED = "ENGLISH_STYLISED"
    NATIVE_STYLISED = "NATIVE_STYLISED"


class UserStaffNameLanguage(AniListEnum):
    ROMAJI_WESTERN = "ROMAJI_WESTERN"
    ROMAJI = "ROMAJI"
    NATIVE = "NATIVE"


class NotificationType(AniListEnum):
    """Kind of notification a user can enable or disable."""

    ACTIVITY_MESSAGE = "ACTIVITY_MESSAGE"
    ACTIVITY_REPLY = "ACTIVITY_REPLY"
    FOLLOWING = "FOLLOWING"
    ACTIVITY_MENTION = "ACTIVITY_MENTION"
    THREAD_COMMENT_MENTION = "THREAD_COMMENT_MENTION"
    THREAD_SUBSCRIBED = "THREAD_SUBSCRIBED"
    THREAD_COMMENT_REPLY = "THREAD_COMMENT_REPLY"
    AIRING = "AIRING"
    ACTIVITY_LIKE = "ACTIVITY_LIKE"
    ACTIVITY_REPLY_LIKE = "ACTIVITY_REPLY_LIKE"
    THREAD_LIKE = "THREAD_LIKE"
    THREAD_COMMENT_LIKE = "THREAD_COMMENT_LIKE"
    ACTIVITY_REPLY_SUBSCRIBED = "ACTIVITY_REPLY_SUBSCRIBED"
    RELATED_MEDIA_ADDITION = "RELATED_MEDIA_ADDITION"
    MEDIA_DATA_CHANGE = "MEDIA_DATA_CHANGE"
    MEDIA_MERGE = "MEDIA_MERGE"
    MEDIA_DELETION = "MEDIA_DELETION"
    MEDIA_SUBMISSION_UPDATE = "MEDIA_SUBMISSION_UPDATE"
    STAFF_SUBMISSION_UPDATE = "STAFF_SUBMISSION_UPDATE"
    CHARACTER_SUBMISSION_UPDATE = "CHARACTER_SUBMISSION_UPDATE"


class _CaseInsensitiveEnum(str, Enum):
    """String enum that also matches its values case-insensitively."""

    @classmethod
    def _missing_(cls, value: object) -> "_CaseInsensitiveEnum | None":
        if isinstance(value, str):
            wanted = value.strip().casefold()
            for member in cls:
                if member.value.casefold() == wanted:
                    return member
        return None

    def __str__(self) -> str:
        return self.value


class Gender(_CaseInsensitiveEnum):
    """Common genders of characters and staff.

    AniList accepts free-form genders; fields typed with this enum keep any other
    value as a plain string.
    """

    MALE = "Male"
    FEMALE = "Female"
    NON_BINARY = "Non-binary"


class Color(_CaseInsensitiveEnum):
    """Preset profile colours. Custom colours are kept as ``#rrggbb`` strings."""

    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    ORANGE = "orange"
    RED = "red"
    GREEN = "green"
    GRAY = "gray"


class Language(_CaseInsensitiveEnum):
    """Languages of staff members and external links.

    Members can also be looked up by ISO 639-1 code, e.g. ``Language("ja")``.
    """

    JAPANESE = "Japanese"
    ENGLISH = "English"
    KOREAN = "Korean"
    ITALIAN = "Italian"
    SPANISH = "Spanish"
    PORTUGUESE = "Portuguese"
    FRENCH = "French"
    GERMAN = "German"
    HEBREW = "Hebrew"
    HUNGARIAN = "Hungarian"
    CHINESE = "Chinese"
    ARABIC = "Arabic"
    FILIPINO = "Filipino"
    CATALAN = "Catalan"
    FINNISH = "Finnish"
    TURKISH = "Turkish"
    DUTCH = "Dutch"
    SWEDISH = "Swedish"
    THAI = "Thai"
    TAGALOG = "Tagalog"
    MALAYSIAN = "Malaysian"
    INDONESIAN = "Indonesian"
    VIETNAMESE = "Vietnamese"
    NEPALI = "Nepali"
    HINDI = "Hindi"
    URDU = "Urdu"

    @classmethod
    def _missing_(cls, value: object) -> "Language | None":
        member = super()._missing_(value)
        if member is None and isinstance(value, str):
            code = value.strip().lower()
            code = _LANGUAGE_CODE_ALIASES.get(code, code)
            for candidate in cls:
                if _LANGUAGE_CODES[candidate.value] == code:
                    return candidate
        return member

    @property
    def code(self) -> str:
        """ISO 639-1 code (``fil`` for Filipino, which has none)."""
        return _LANGUAGE_CODES[self.value]

    @property
    def iso(self) -> str:
        return self.code

    @property
    def native(self) -> str:
        """Name of the language in that language."""
        return _LANGUAGE_NATIVE_NAMES[self.value]


_LANGUAGE_CODE_ALIASES = {"jp": "ja", "uk": "en"}

_LANGUAGE_CODES = {
    "Japanese": "ja",
    "English": "en",
    "Korean": "ko",
    "Italian": "it",
    "Spanish": "es",
    "Portuguese": "pt",
    "French": "fr",
    "German": "de",
    "Hebrew": "he",
    "Hungarian": "hu",
    "Chinese": "zh",
    "Arabic": "ar",
    "Filipino": "fil",
    "Catalan": "ca",
    "Finnish": "fi",
    "Turkish": "tr",
    "Dutch": "nl",
    "Swedish": "sv",
    "Thai": "th",
    "Tagalog": "tl",
    "Malaysian": "ms",
    "Indonesian": "id",
    "Vietnamese": "vi",
    "Nepali": "ne",
    "Hindi": "hi",
    "Urdu": "ur",
}

_LANGUAGE_NATIVE_NAMES = {
    "Japanese": "日本語",
    "English": "English",
    "Korean": "한국어",
    "Italian": "Italiano",
    "Spanish": "Español",
    "Portuguese": "Português",
    "French": "Français",
    "German": "Deutsch",
    "Hebrew": "עברית",
    "Hungarian": "Magyar",
    "Chinese": "中文",
    "Arabic": "العربية",
    "Filipino": "Filipino",
    "Catalan": "Català",
    "Finnish": "Suomi",
    "Turkish": "Türkçe",
    "Dutch": "Nederlands",
    "Swedish": "Svenska",
    "Thai": "ไทย",
    "Tagalog": "Tagalog",
    "Malaysian": "Bahasa Melayu",
    "Indonesian": "Bahasa Indonesia",
    "Vietnamese": "Tiếng Việt",
    "Nepali": "नेपाली",
    "Hindi": "हिंदी",
    "Urdu": "اردو",
}
