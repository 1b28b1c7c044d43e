"""HTML rendering of journals, entries and document tree nodes."""

import io
import logging
import sys
from typing import Any, Callable, TextIO, get_args

from ..core.errors import TreeTooDeep
from ..core.journal import Journal
from ..core.model import (
    Audio,
    Block,
    BlockQuote,
    ContentDates,
    Emphasis,
    Entry,
    Group,
    HeaderElement,
    Image,
    LinkElement,
    ListElement,
    ListElementMarker,
    Paragraph,
    PhysicalSourcePageBegin,
    Span,
    Strikethrough,
    Strong,
    Text,
    Video,
)
from ..core.ports import Renderer
from ..core.text import EntryId
from ..core.utils import format_timestamp
from .escape import attr, escape_text, link_parts, media_src

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 128

# Frames kept free for callers below the renderer.
_STACK_HEADROOM = 200

_BLOCK_TYPES = get_args(Block)
_SPAN_TYPES = get_args(Span)

Write = Callable[[str], Any]


def depth_ceiling() -> int:
    """Deepest max_depth the current recursion limit can render through."""
    # A nested list costs two frames per level; allow three.
    return max(1, (sys.getrecursionlimit() - _STACK_HEADROOM) // 3)


def check_max_depth(max_depth: int) -> int:
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")
    ceiling = depth_ceiling()
    if max_depth > ceiling:
        raise ValueError(
            f"max_depth {max_depth} exceeds {ceiling}, the most the recursion limit allows"
        )
    return max_depth


class HtmlRenderer(Renderer):
    """
    Walks a journal tree depth-first and writes an HTML fragment.

    Options:
        max_depth: deepest allowed nesting of spans/blocks (TreeTooDeep beyond)
        conventional_media_tags: render Video as <video> and Audio as <audio>;
            off by default, which keeps the historical swapped mapping
        date_format: strftime pattern for entry dates (default
            `YYYY-MM-DD HH:MM:SS +HH:MM`)
    """

    def __init__(
        self,
        max_depth: int = DEFAULT_MAX_DEPTH,
        conventional_media_tags: bool = False,
        date_format: str | None = None,
    ):
        self.max_depth = check_max_depth(max_depth)
        self.conventional_media_tags = conventional_media_tags
        self.date_format = date_format

    def render_html(self, node: Any) -> str:
        buf = io.StringIO()
        self.write_html(node, buf)
        return buf.getvalue()

    def write_html(self, node: Any, sink: TextIO) -> None:
        """Render `node` into `sink`; errors raised by the sink propagate."""
        out = sink.write
        if isinstance(node, Journal):
            self._journal(node, out)
        elif isinstance(node, _BLOCK_TYPES):
            self._block(node, out, 1)
        elif isinstance(node, _SPAN_TYPES):
            self._span(node, out, 1)
        elif isinstance(node, Entry):
            raise TypeError("Entries render with their id; use render_entry()")
        else:
            raise TypeError(f"Cannot render {type(node).__name__} as HTML")

    def render_entry(self, entry_id: EntryId, entry: Entry) -> str:
        buf = io.StringIO()
        self._entry(entry_id, entry, buf.write)
        return buf.getvalue()

    # Journal and entries

    def _journal(self, journal: Journal, out: Write) -> None:
        logger.debug("Rendering journal with %d entries", len(journal))
        for entry_id in journal:
            self._entry(entry_id, journal[entry_id], out)

    def _entry(self, entry_id: EntryId, entry: Entry, out: Write) -> None:
        out(f"<header{attr('data-id', entry_id)}>")
        out(f"<h2>{escape_text(entry.title)}</h2>")
        if entry.subtitle is not None:
            out(f'<div class="subtitle">{escape_text(entry.subtitle)}</div>')
        self._dates(entry.content_dates, out)
        out("</header>")
        out("<article>")
        for block in entry.elements:
            self._block(block, out, 1)
        out("</article>")

    def _dates(self, dates: ContentDates, out: Write) -> None:
        created = escape_text(format_timestamp(dates.created, self.date_format))
        modified = escape_text(format_timestamp(dates.last_modified, self.date_format))
        out(f'<div class="date">{created}</div>')
        out(f'<div class="date">Last modified: {modified}</div>')

    # Blocks

    def _block(self, block: Block, out: Write, depth: int) -> None:
        self._check_depth(depth)
        match block:
            case Paragraph(content=span):
                out("<p>")
                self._span(span, out, depth + 1)
                out("</p>")
            case BlockQuote(content=span):
                out("<blockquote>")
                self._span(span, out, depth + 1)
                out("</blockquote>")
            case HeaderElement(text=span, level=level):
                out(f"<h{int(level)}>")
                self._span(span, out, depth + 1)
                out(f"</h{int(level)}>")
            case ListElement():
                self._list(block, out, depth)
            case Image(source=ref):
                out(f'<img src="{media_src(ref)}">')
            case Video(source=ref):
                tag = "video" if self.conventional_media_tags else "audio"
                out(f'<{tag} controls src="{media_src(ref)}"></{tag}>')
            case Audio(source=ref):
                tag = "audio" if self.conventional_media_tags else "video"
                out(f'<{tag} controls src="{media_src(ref)}"></{tag}>')
            case _:
                raise TypeError(f"Not a block element: {type(block).__name__}")

    def _list(self, lst: ListElement, out: Write, depth: int) -> None:
        tag = "ol" if lst.marker is ListElementMarker.ORDERED else "ul"
        out(f"<{tag}>")
        for item in lst.items:
            out("<li>")
            for block in item:
                self._block(block, out, depth + 1)
            out("</li>")
        out(f"</{tag}>")

    # Spans

    def _span(self, span: Span, out: Write, depth: int) -> None:
        self._check_depth(depth)
        match span:
            case Text(text=prose):
                out(escape_text(prose))
            case Emphasis(child=child):
                out("<em>")
                self._span(child, out, depth + 1)
                out("</em>")
            case Strong(child=child):
                out("<strong>")
                self._span(child, out, depth + 1)
                out("</strong>")
            case Strikethrough(child=child):
                out("<del>")
                self._span(child, out, depth + 1)
                out("</del>")
            case LinkElement(kind=kind, content=content):
                open_tag, fallback = link_parts(kind)
                out(open_tag)
                if content is None:
                    out(fallback)
                else:
                    self._span(content, out, depth + 1)
                out("</a>")
            case Group(children=children):
                for child in children:
                    self._span(child, out, depth + 1)
            case PhysicalSourcePageBegin(page_index=index, source_photo=photo):
                out(f'<span class="source-page-ref" data-idx="{index}"')
                if photo is not None:
                    out(f' data-src="{media_src(photo)}"')
                out("></span>")
            case _:
                raise TypeError(f"Not a span element: {type(span).__name__}")

    def _check_depth(self, depth: int) -> None:
        if depth > self.max_depth:
            raise TreeTooDeep(self.max_depth)


_default = HtmlRenderer()


def render_html(node: Any) -> str:
    """Render a journal, block or span with the default options."""
    return _default.render_html(node)


def write_html(node: Any, sink: TextIO) -> None:
    _default.write_html(node, sink)
