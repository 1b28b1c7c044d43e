"""archivist: a personal journal model and its HTML renderer."""

from .core.errors import (
    ArchivistError,
    DuplicateEntryId,
    EmptySequence,
    InvalidIdentifier,
    InvalidProse,
    InvalidUrl,
    MalformedEntry,
    TreeTooDeep,
)
from .core.journal import Journal
from .core.model import ContentDates, Entry
from .core.nonempty import NonEmpty
from .core.text import EntryId, Identifier, Prose
from .render import HtmlRenderer, render_html, write_html

__version__ = "0.1.0"

__all__ = [
    "ArchivistError",
    "ContentDates",
    "DuplicateEntryId",
    "EmptySequence",
    "Entry",
    "EntryId",
    "HtmlRenderer",
    "Identifier",
    "InvalidIdentifier",
    "InvalidProse",
    "InvalidUrl",
    "Journal",
    "MalformedEntry",
    "NonEmpty",
    "Prose",
    "TreeTooDeep",
    "__version__",
    "render_html",
    "write_html",
]
