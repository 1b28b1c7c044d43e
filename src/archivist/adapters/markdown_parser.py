import logging
import re
from pathlib import PurePath
from urllib.parse import urlsplit

from ..core.errors import ArchivistError, MalformedEntry
from ..core.model import (
    Audio,
    Block,
    BlockQuote,
    Emphasis,
    Group,
    HeaderElement,
    HeaderLevel,
    Image,
    LinkElement,
    LinkElementKind,
    ListElement,
    ListElementMarker,
    MediaLink,
    MediaPath,
    MediaReference,
    Paragraph,
    PersonLink,
    PhysicalSourcePageBegin,
    PlaceLink,
    Span,
    Strikethrough,
    Strong,
    TagLink,
    Text,
    UrlLink,
    Video,
)
from ..core.nonempty import NonEmpty
from ..core.ports import ParserStrategy
from ..core.text import PersonId, PlaceId, TagId, Url, looks_like_url

logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+?)\s*$")
QUOTE_RE = re.compile(r"^>\s?(.*)$")
BULLET_RE = re.compile(r"^[-*+]\s+(.+)$")
ORDERED_RE = re.compile(r"^\d+[.)]\s+(.+)$")
MEDIA_RE = re.compile(r"^!\[[^\]]*\]\(\s*(\S+?)\s*\)$")

INLINE_RE = re.compile(
    r"(?P<strong>\*\*(?P<strong_body>.+?)\*\*)"
    r"|(?P<strike>~~(?P<strike_body>.+?)~~)"
    r"|(?P<em>\*(?P<em_star>[^*\s](?:.*?[^*\s])?)\*|(?<!\w)_(?P<em_under>[^_\s](?:.*?[^_\s])?)_(?!\w))"
    r"|(?P<link>\[(?P<link_text>[^\]]*)\]\(\s*(?P<link_target>\S+?)\s*\))"
    r"|(?P<auto><(?P<auto_url>[A-Za-z][A-Za-z0-9+.-]+:[^>\s]+)>)"
    r"|(?P<page>\{\{page\s+(?P<page_idx>\d+)(?:\s+(?P<page_src>[^}\s]+))?\s*\}\})"
)

VIDEO_SUFFIXES = frozenset({".mp4", ".webm", ".mov", ".mkv"})
AUDIO_SUFFIXES = frozenset({".mp3", ".ogg", ".wav", ".m4a", ".flac"})

_REF_PREFIXES = (
    ("tag:", lambda ident: TagLink(TagId(ident))),
    ("place:", lambda ident: PlaceLink(PlaceId(ident))),
    ("person:", lambda ident: PersonLink(PersonId(ident))),
)


def media_reference(src: str) -> MediaReference:
    """Remote when `src` carries a URL scheme, a local path otherwise."""
    if looks_like_url(src):
        return MediaLink(Url(src))
    return MediaPath(PurePath(src))


def media_block(src: str) -> Block:
    ref = media_reference(src)
    path = urlsplit(src).path if isinstance(ref, MediaLink) else src
    suffix = PurePath(path).suffix.lower()
    if suffix in VIDEO_SUFFIXES:
        return Video(ref)
    if suffix in AUDIO_SUFFIXES:
        return Audio(ref)
    return Image(ref)


def link_kind(target: str) -> LinkElementKind:
    for prefix, build in _REF_PREFIXES:
        if target.startswith(prefix):
            return build(target[len(prefix):])
    return UrlLink(Url(target))


def _is_relative(target: str) -> bool:
    if target.startswith(tuple(prefix for prefix, _ in _REF_PREFIXES)):
        return False
    try:
        return not urlsplit(target).scheme
    except ValueError:
        return False


def parse_inline(text: str) -> Span:
    """Parse inline markup; a single span comes back bare, several as a Group."""
    spans = _inline_spans(text)
    return spans[0] if len(spans) == 1 else Group(spans)


def _inline_spans(text: str) -> list[Span]:
    out: list[Span] = []
    pos = 0
    for m in INLINE_RE.finditer(text):
        if m.start() > pos:
            out.append(Text(text[pos:m.start()]))
        out.append(_inline_token(m))
        pos = m.end()
    if pos < len(text):
        out.append(Text(text[pos:]))
    return out


def _inline_token(m: re.Match[str]) -> Span:
    if m.group("strong"):
        return Strong(parse_inline(m.group("strong_body")))
    if m.group("strike"):
        return Strikethrough(parse_inline(m.group("strike_body")))
    if m.group("em"):
        body = m.group("em_star") or m.group("em_under")
        return Emphasis(parse_inline(body))
    if m.group("link"):
        label = m.group("link_text")
        target = m.group("link_target")
        if _is_relative(target):
            # Relative targets keep only their label.
            logger.warning("Relative link target %r kept as text", target)
            return parse_inline(label) if label else Text(target)
        content = parse_inline(label) if label else None
        return LinkElement(link_kind(target), content)
    if m.group("auto"):
        return LinkElement(UrlLink(Url(m.group("auto_url"))))
    src = m.group("page_src")
    return PhysicalSourcePageBegin(
        page_index=int(m.group("page_idx")),
        source_photo=media_reference(src) if src else None,
    )


def _list_item(line: str) -> tuple[ListElementMarker, str] | None:
    m = BULLET_RE.match(line)
    if m:
        return ListElementMarker.UNORDERED, m.group(1)
    m = ORDERED_RE.match(line)
    if m:
        return ListElementMarker.ORDERED, m.group(1)
    return None


def _starts_block(line: str) -> bool:
    return bool(
        HEADING_RE.match(line)
        or MEDIA_RE.match(line.strip())
        or QUOTE_RE.match(line)
        or _list_item(line)
    )


def _chunks(text: str) -> list[list[str]]:
    """Runs of non-blank lines, split at blank lines."""
    chunks: list[list[str]] = []
    current: list[str] = []
    for ln in text.splitlines():
        if ln.strip():
            current.append(ln.rstrip())
        elif current:
            chunks.append(current)
            current = []
    if current:
        chunks.append(current)
    return chunks


class MarkdownParser(ParserStrategy):
    """
    Parses the Markdown subset journal entries are written in:
    headings, paragraphs, block quotes, flat lists, standalone media lines,
    and inline strong/emphasis/strikethrough/links/page markers.
    """

    def parse(self, text: str, source: str) -> NonEmpty[Block]:
        blocks: list[Block] = []
        try:
            for chunk in _chunks(text):
                blocks.extend(self._chunk_blocks(chunk))
        except MalformedEntry:
            raise
        except ArchivistError as e:
            raise MalformedEntry(source, str(e)) from e
        if not blocks:
            raise MalformedEntry(source, "entry has no content")
        return NonEmpty.from_iterable(blocks)

    def _chunk_blocks(self, lines: list[str]) -> list[Block]:
        blocks: list[Block] = []
        i = 0
        while i < len(lines):
            line = lines[i]

            heading = HEADING_RE.match(line)
            if heading:
                level = HeaderLevel(len(heading.group(1)))
                blocks.append(HeaderElement(parse_inline(heading.group(2)), level))
                i += 1
                continue

            media = MEDIA_RE.match(line.strip())
            if media:
                blocks.append(media_block(media.group(1)))
                i += 1
                continue

            if QUOTE_RE.match(line):
                quoted = []
                while i < len(lines) and QUOTE_RE.match(lines[i]):
                    quoted.append(QUOTE_RE.match(lines[i]).group(1).strip())
                    i += 1
                text = " ".join(q for q in quoted if q)
                if text:
                    blocks.append(BlockQuote(parse_inline(text)))
                continue

            if _list_item(line):
                lst, i = self._list(lines, i)
                blocks.append(lst)
                continue

            paragraph = [line.strip()]
            i += 1
            while i < len(lines) and not _starts_block(lines[i]):
                paragraph.append(lines[i].strip())
                i += 1
            blocks.append(Paragraph(parse_inline(" ".join(paragraph))))

        return blocks

    def _list(self, lines: list[str], i: int) -> tuple[ListElement, int]:
        marker, first = _list_item(lines[i])
        items = [[first.strip()]]
        i += 1
        while i < len(lines):
            line = lines[i]
            item = _list_item(line)
            if item:
                if item[0] is not marker:
                    break
                items.append([item[1].strip()])
            elif line[:1].isspace() and not _starts_block(line.strip()):
                # Indented continuation of the previous item
                items[-1].append(line.strip())
            else:
                break
            i += 1
        return (
            ListElement(
                marker,
                [[Paragraph(parse_inline(" ".join(parts)))] for parts in items],
            ),
            i,
        )
