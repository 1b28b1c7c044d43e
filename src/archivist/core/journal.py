from typing import Iterable, Iterator, Mapping

from .catalog import NoteEntry, Person, Place, Tag
from .errors import DuplicateEntryId, InvalidIdentifier
from .model import Entry
from .text import EntryId, NoteId, PersonId, PlaceId, TagId


class Journal(Mapping[EntryId, Entry]):
    """
    Entries keyed by EntryId. Iteration is always in ascending id order
    (the identifier string's natural order), whatever the insertion order;
    that order is the render order.

    Side tables for tags, places, people and notes are plain dicts. Nothing
    checks that entries only refer to ids present in them.
    """

    def __init__(self, entries: Mapping[EntryId, Entry] | Iterable[tuple[EntryId, Entry]] | None = None):
        self._entries: dict[EntryId, Entry] = {}
        self.tags: dict[TagId, Tag] = {}
        self.places: dict[PlaceId, Place] = {}
        self.people: dict[PersonId, Person] = {}
        self.notes: dict[NoteId, NoteEntry] = {}

        pairs = entries.items() if isinstance(entries, Mapping) else (entries or ())
        for entry_id, entry in pairs:
            self.insert(entry_id, entry)

    # Mapping interface
    def __getitem__(self, k: EntryId | str) -> Entry:
        key = _lookup_key(k)
        if key is None:
            raise KeyError(k)
        return self._entries[key]

    def __iter__(self) -> Iterator[EntryId]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, k: object) -> bool:
        key = _lookup_key(k)
        return key is not None and key in self._entries

    # Building
    def insert(self, entry_id: EntryId | str, entry: Entry) -> EntryId:
        """Add an entry; an id already present raises DuplicateEntryId."""
        key = _entry_id(entry_id)
        if key in self._entries:
            raise DuplicateEntryId(key)
        self._entries[key] = entry
        return key

    def replace(self, entry_id: EntryId | str, entry: Entry) -> Entry | None:
        """Add or overwrite an entry, returning the one it displaced."""
        key = _entry_id(entry_id)
        previous = self._entries.get(key)
        self._entries[key] = entry
        return previous

    def remove(self, entry_id: EntryId | str) -> Entry:
        return self._entries.pop(_entry_id(entry_id))

    def __repr__(self) -> str:
        ids = ", ".join(str(k) for k in self)
        return f"Journal([{ids}])"


def _entry_id(value: EntryId | str) -> EntryId:
    if isinstance(value, EntryId):
        return value
    if isinstance(value, str):
        return EntryId(value)
    raise TypeError(f"Expected EntryId or str, got {type(value).__name__}")


def _lookup_key(value: object) -> EntryId | None:
    """The EntryId a lookup means, or None when it cannot name an entry."""
    if not isinstance(value, (EntryId, str)):
        return None
    try:
        return _entry_id(value)
    except InvalidIdentifier:
        return None
