"""Errors raised by the archivist core and its edge adapters."""

from typing import Any


class ArchivistError(ValueError):
    """Base class for every error archivist raises on bad input."""


class InvalidProse(ArchivistError):
    """Text that must hold at least one grapheme cluster was empty."""


class InvalidIdentifier(InvalidProse):
    """Identifier text was empty after normalization."""


class InvalidUrl(ArchivistError):
    """A string could not be used as an absolute URL."""


class EmptySequence(ArchivistError):
    """A non-empty sequence was built from zero elements."""


class DuplicateEntryId(ArchivistError):
    def __init__(self, entry_id: Any):
        super().__init__(f"Duplicate entry id: {entry_id}")
        self.entry_id = entry_id


class TreeTooDeep(ArchivistError):
    def __init__(self, max_depth: int):
        super().__init__(f"Document tree nests deeper than {max_depth} levels")
        self.max_depth = max_depth


class MalformedEntry(ArchivistError):
    """A journal source file could not be turned into an entry."""

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source
