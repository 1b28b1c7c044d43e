from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, IntEnum
from pathlib import PurePath
from typing import Union

from .nonempty import NonEmpty
from .text import PersonId, PlaceId, Prose, TagId, Url

_U32_MAX = 2**32 - 1


def _coerce_prose(value: Prose | str) -> Prose:
    return value if isinstance(value, Prose) else Prose(value)


# --- media -----------------------------------------------------------------


@dataclass(frozen=True)
class MediaLink:
    url: Url

    def __post_init__(self) -> None:
        if isinstance(self.url, str):
            object.__setattr__(self, "url", Url(self.url))


@dataclass(frozen=True)
class MediaPath:
    path: PurePath

    def __post_init__(self) -> None:
        if isinstance(self.path, str):
            object.__setattr__(self, "path", PurePath(self.path))


MediaReference = Union[MediaLink, MediaPath]


@dataclass(frozen=True)
class Image:
    source: MediaReference


@dataclass(frozen=True)
class Video:
    source: MediaReference


@dataclass(frozen=True)
class Audio:
    source: MediaReference


MediaElement = Union[Image, Video, Audio]


# --- spans (inline content) -------------------------------------------------


@dataclass(frozen=True)
class PhysicalSourcePageBegin:
    """Marks where a page of a scanned physical source begins."""

    page_index: int
    source_photo: MediaReference | None = None

    def __post_init__(self) -> None:
        if isinstance(self.page_index, bool) or not isinstance(self.page_index, int):
            raise TypeError("page_index must be an int")
        if not 0 <= self.page_index <= _U32_MAX:
            raise ValueError(f"page_index out of range: {self.page_index}")


@dataclass(frozen=True)
class Text:
    text: Prose

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", _coerce_prose(self.text))


@dataclass(frozen=True)
class Emphasis:
    child: "Span"


@dataclass(frozen=True)
class Strong:
    child: "Span"


@dataclass(frozen=True)
class Strikethrough:
    child: "Span"


@dataclass(frozen=True)
class UrlLink:
    url: Url

    def __post_init__(self) -> None:
        if isinstance(self.url, str):
            object.__setattr__(self, "url", Url(self.url))


@dataclass(frozen=True)
class TagLink:
    tag: TagId


@dataclass(frozen=True)
class PlaceLink:
    place: PlaceId


@dataclass(frozen=True)
class PersonLink:
    person: PersonId


# Tag/place/person targets are opaque ids; nothing checks them against the
# journal's side tables.
LinkElementKind = Union[UrlLink, TagLink, PlaceLink, PersonLink]


@dataclass(frozen=True)
class LinkElement:
    kind: LinkElementKind
    content: "Span | None" = None  # None: the target itself is the link text


@dataclass(frozen=True)
class Group:
    """Sibling spans rendered back to back."""

    children: NonEmpty["Span"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", NonEmpty.from_iterable(self.children))


Span = Union[
    PhysicalSourcePageBegin,
    Text,
    Emphasis,
    Strong,
    Strikethrough,
    LinkElement,
    Group,
]


# --- blocks -----------------------------------------------------------------


@dataclass(frozen=True)
class Paragraph:
    content: Span


@dataclass(frozen=True)
class BlockQuote:
    content: Span


class ListElementMarker(Enum):
    UNORDERED = "unordered"
    ORDERED = "ordered"


@dataclass(frozen=True)
class ListElement:
    """A list whose every item is itself one or more blocks."""

    marker: ListElementMarker
    items: NonEmpty[NonEmpty["Block"]]

    def __post_init__(self) -> None:
        items = NonEmpty.from_iterable(
            NonEmpty.from_iterable(item) for item in self.items
        )
        object.__setattr__(self, "items", items)


class HeaderLevel(IntEnum):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6


@dataclass(frozen=True)
class HeaderElement:
    text: Span
    level: HeaderLevel = HeaderLevel.ONE

    def __post_init__(self) -> None:
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise TypeError("level must be a HeaderLevel or int")
        object.__setattr__(self, "level", HeaderLevel(self.level))


Block = Union[
    Paragraph,
    Image,
    Video,
    Audio,
    BlockQuote,
    ListElement,
    HeaderElement,
]


# --- entries ----------------------------------------------------------------


@dataclass(frozen=True)
class ContentDates:
    created: datetime
    last_modified: datetime

    def __post_init__(self) -> None:
        for name in ("created", "last_modified"):
            value = getattr(self, name)
            if value.tzinfo is None or value.utcoffset() is None:
                raise ValueError(f"{name} must be timezone-aware")

    @classmethod
    def now(cls) -> "ContentDates":
        stamp = datetime.now(timezone.utc)
        return cls(created=stamp, last_modified=stamp)


@dataclass(frozen=True)
class Entry:
    title: Prose
    content_dates: ContentDates
    elements: NonEmpty[Block]
    subtitle: Prose | None = None
    tags: tuple[TagId, ...] = field(default_factory=tuple)
    places: tuple[PlaceId, ...] = field(default_factory=tuple)
    people: tuple[PersonId, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", _coerce_prose(self.title))
        if self.subtitle is not None:
            object.__setattr__(self, "subtitle", _coerce_prose(self.subtitle))
        object.__setattr__(self, "elements", NonEmpty.from_iterable(self.elements))
        object.__setattr__(self, "tags", tuple(TagId(t) if isinstance(t, str) else t for t in self.tags))
        object.__setattr__(self, "places", tuple(PlaceId(p) if isinstance(p, str) else p for p in self.places))
        object.__setattr__(self, "people", tuple(PersonId(p) if isinstance(p, str) else p for p in self.people))
