"""Validated string values: prose, identifiers, typed ids and URLs."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from .errors import InvalidIdentifier, InvalidProse, InvalidUrl
from .utils import normalize_identifier


@dataclass(frozen=True, order=True)
class Prose:
    """A string with at least one grapheme cluster."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Prose expects str, got {type(self.text).__name__}")
        # Every non-empty str holds at least one grapheme cluster.
        if not self.text:
            raise InvalidProse("Prose must not be empty")

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, order=True)
class Identifier:
    """
    A normalized, non-empty key. The text is NFC-normalized and stripped
    before it is stored; ordering and equality follow the stored string.
    """

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Identifier expects str, got {type(self.text).__name__}")
        normalized = normalize_identifier(self.text)
        if not normalized:
            raise InvalidIdentifier(f"Identifier is empty after normalization: {self.text!r}")
        object.__setattr__(self, "text", normalized)

    @property
    def prose(self) -> Prose:
        return Prose(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, order=True)
class _TypedId:
    # Dataclass ordering only compares instances of the exact same class,
    # so ids of different kinds never mix.
    identifier: Identifier

    def __post_init__(self) -> None:
        if isinstance(self.identifier, str):
            object.__setattr__(self, "identifier", Identifier(self.identifier))
        elif not isinstance(self.identifier, Identifier):
            raise TypeError(
                f"{type(self).__name__} expects Identifier or str, "
                f"got {type(self.identifier).__name__}"
            )

    def __str__(self) -> str:
        return self.identifier.text


@dataclass(frozen=True, order=True)
class EntryId(_TypedId):
    pass


@dataclass(frozen=True, order=True)
class TagId(_TypedId):
    pass


@dataclass(frozen=True, order=True)
class PlaceId(_TypedId):
    pass


@dataclass(frozen=True, order=True)
class PersonId(_TypedId):
    pass


@dataclass(frozen=True, order=True)
class NoteId(_TypedId):
    pass


_HOST_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


@dataclass(frozen=True)
class Url:
    """An absolute URL, kept exactly as written."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"Url expects str, got {type(self.value).__name__}")
        try:
            parts = urlsplit(self.value)
        except ValueError as e:
            raise InvalidUrl(f"Invalid URL {self.value!r}: {e}") from e
        if not parts.scheme:
            raise InvalidUrl(f"URL has no scheme: {self.value!r}")
        if parts.scheme.lower() in _HOST_SCHEMES and not parts.netloc:
            raise InvalidUrl(f"URL has no host: {self.value!r}")

    @property
    def scheme(self) -> str:
        return urlsplit(self.value).scheme.lower()

    def __str__(self) -> str:
        return self.value


def looks_like_url(text: str) -> bool:
    """True when `text` carries a URL scheme (`https://...`, `mailto:...`)."""
    try:
        parts = urlsplit(text)
    except ValueError:
        return False
    # Single letters are Windows drive names, not schemes.
    return len(parts.scheme) > 1 and (bool(parts.netloc) or parts.scheme not in _HOST_SCHEMES)
