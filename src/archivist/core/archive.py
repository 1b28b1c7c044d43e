import logging
from collections.abc import Iterable
from datetime import date, datetime, time, timezone
from typing import Any

from .errors import ArchivistError, MalformedEntry
from .journal import Journal
from .model import ContentDates, Entry
from .ports import EntryCodec, ParserStrategy, StorageStrategy
from .text import EntryId, PersonId, PlaceId, Prose, TagId

logger = logging.getLogger(__name__)


class Archive:
    """
    Builds journal entries out of stored source files: storage yields the
    raw text, the codec splits frontmatter from body, the parser turns the
    body into blocks.
    """

    def __init__(
        self, storage: StorageStrategy, parser: ParserStrategy, codec: EntryCodec
    ):
        self.storage = storage
        self.parser = parser
        self.codec = codec

    def get(self, name: str) -> tuple[EntryId, Entry] | None:
        raw = self.storage.read_raw(name)
        if raw is None:
            return None
        try:
            meta, body_text = self.codec.decode_file(raw, name)
        except ValueError as e:
            raise MalformedEntry(name, f"unreadable frontmatter: {e}") from e
        elements = self.parser.parse(body_text, name)
        return entry_from_meta(meta, elements, name)

    def list_names(self) -> Iterable[str]:
        return self.storage.list_all_names()

    def load(self) -> Journal:
        """Read every stored entry into a Journal; two files claiming one id is an error."""
        journal = Journal()
        for name in self.list_names():
            found = self.get(name)
            if found is None:
                continue
            entry_id, entry = found
            journal.insert(entry_id, entry)
            logger.debug("Loaded entry %s from %s", entry_id, name)
        logger.info("Loaded %d entries", len(journal))
        return journal


def entry_from_meta(meta: dict[str, Any], elements: Any, source: str) -> tuple[EntryId, Entry]:
    """
    Assemble an entry from decoded frontmatter plus parsed blocks.

    Recognised keys: id, title (required), subtitle, created, last_modified
    (top level or nested under content_dates), tags, places, people.
    """
    try:
        entry_id = EntryId(str(meta.get("id", source)))

        title = meta.get("title")
        if title is None:
            raise MalformedEntry(source, "missing title")
        subtitle = meta.get("subtitle")

        entry = Entry(
            title=Prose(str(title)),
            subtitle=Prose(str(subtitle)) if subtitle is not None else None,
            content_dates=_content_dates(meta, source),
            elements=elements,
            tags=tuple(TagId(str(t)) for t in _id_list(meta, "tags", source)),
            places=tuple(PlaceId(str(p)) for p in _id_list(meta, "places", source)),
            people=tuple(PersonId(str(p)) for p in _id_list(meta, "people", source)),
        )
    except MalformedEntry:
        raise
    except ArchivistError as e:
        raise MalformedEntry(source, str(e)) from e
    return entry_id, entry


def _id_list(meta: dict[str, Any], key: str, source: str) -> list[Any]:
    value = meta.get(key) or []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise MalformedEntry(source, f"{key} must be a list")
    return value


def _content_dates(meta: dict[str, Any], source: str) -> ContentDates:
    dates = meta.get("content_dates") or {}
    if not isinstance(dates, dict):
        raise MalformedEntry(source, "content_dates must be a mapping")

    created = dates.get("created", meta.get("created"))
    modified = dates.get("last_modified", meta.get("last_modified"))

    if created is None:
        logger.warning("%s has no created date, stamping it with the current time", source)
        now = ContentDates.now()
        created = now.created
        if modified is None:
            return now
    created = parse_timestamp(created, source)
    modified = parse_timestamp(modified, source) if modified is not None else created
    return ContentDates(created=created, last_modified=modified)


def parse_timestamp(value: Any, source: str = "<input>") -> datetime:
    """
    Aware datetime from a YAML value or string. Naive values are UTC.

    Accepts `2019-04-13 20:22:01 +00:00` (space before the offset) as well
    as ISO 8601.
    """
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        result = datetime.combine(value, time())
    elif isinstance(value, str):
        text = value.strip()
        head, sep, tail = text.rpartition(" ")
        if sep and tail[:1] in ("+", "-") and ":" in tail:
            text = head + tail
        try:
            result = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as e:
            raise MalformedEntry(source, f"bad timestamp {value!r}") from e
    else:
        raise MalformedEntry(source, f"bad timestamp {value!r}")

    if result.tzinfo is None:
        result = result.replace(tzinfo=timezone.utc)
    return result
