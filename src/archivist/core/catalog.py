"""
Side-table entities of a journal: tags, places, people and notes.

These are plain data. Entries refer to them by typed id and the renderer
never looks them up.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .model import Block, ContentDates
from .nonempty import NonEmpty
from .text import EntryId, Prose

# Geocoordinates are stored as integers in units of 1e-7 degree.
DECIMICRO_PER_DEGREE = 10_000_000


@dataclass(frozen=True)
class Tag:
    name: Prose | None = None
    description: Prose | None = None


@dataclass(frozen=True)
class Person:
    name: Prose
    description: Prose | None = None


@dataclass(frozen=True)
class Address:
    """Postal address; one non-empty line per element."""

    lines: NonEmpty[str]

    def __post_init__(self) -> None:
        lines = NonEmpty.from_iterable(self.lines)
        for line in lines:
            if not line or "\n" in line or "\r" in line:
                raise ValueError(f"Invalid address line: {line!r}")
        object.__setattr__(self, "lines", lines)

    def __str__(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True, order=True)
class DecimicroGeocoordinate:
    value: int

    @classmethod
    def from_degrees(cls, degrees: float) -> "DecimicroGeocoordinate":
        return cls(round(degrees * DECIMICRO_PER_DEGREE))

    @property
    def degrees(self) -> float:
        return self.value / DECIMICRO_PER_DEGREE


@dataclass(frozen=True)
class GeoCoordinates:
    latitude: DecimicroGeocoordinate
    longitude: DecimicroGeocoordinate

    def __post_init__(self) -> None:
        if abs(self.latitude.value) > 90 * DECIMICRO_PER_DEGREE:
            raise ValueError(f"Latitude out of range: {self.latitude.degrees}")
        if abs(self.longitude.value) > 180 * DECIMICRO_PER_DEGREE:
            raise ValueError(f"Longitude out of range: {self.longitude.degrees}")


PhysicalLocation = Union[Address, GeoCoordinates]


@dataclass(frozen=True)
class Place:
    location: PhysicalLocation
    name: Prose | None = None
    description: Prose | None = None


@dataclass(frozen=True, order=True)
class EntryContentLocation:
    paragraph_idx: int
    word_idx: int

    def __post_init__(self) -> None:
        if self.paragraph_idx < 0 or self.word_idx < 0:
            raise ValueError("Content locations are non-negative")


@dataclass(frozen=True)
class EntryContentSpan:
    """Inclusive range: both `start` and `end` belong to the span."""

    start: EntryContentLocation
    end: EntryContentLocation

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError("Span ends before it starts")


@dataclass(frozen=True)
class EntryContentReference:
    id: EntryId
    span: EntryContentSpan


@dataclass(frozen=True)
class Note:
    span: EntryContentSpan
    content_dates: ContentDates
    text: NonEmpty[Block]

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", NonEmpty.from_iterable(self.text))


@dataclass(frozen=True)
class NoteEntry:
    note: Note
    target_entry: EntryId
