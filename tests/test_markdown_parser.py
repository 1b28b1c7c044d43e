"""Tests for the Markdown body parser."""

from pathlib import PurePath

import pytest

from archivist.adapters.markdown_parser import MarkdownParser, link_kind, parse_inline
from archivist.core.errors import MalformedEntry
from archivist.core.model import (
    Audio,
    BlockQuote,
    Emphasis,
    Group,
    HeaderElement,
    HeaderLevel,
    Image,
    LinkElement,
    ListElement,
    ListElementMarker,
    MediaLink,
    MediaPath,
    Paragraph,
    PersonLink,
    PhysicalSourcePageBegin,
    PlaceLink,
    Strikethrough,
    Strong,
    TagLink,
    Text,
    UrlLink,
    Video,
)
from archivist.core.text import PersonId, PlaceId, TagId
from archivist.render import render_html


def parse(text: str):
    return list(MarkdownParser().parse(text, "test"))


def test_single_paragraph():
    assert parse("asdf\n") == [Paragraph(Text("asdf"))]


def test_paragraph_soft_breaks_join():
    assert parse("one\ntwo\n\nthree") == [
        Paragraph(Text("one two")),
        Paragraph(Text("three")),
    ]


def test_headings():
    blocks = parse("# Day one\n\n### Later\nbody")
    assert blocks[0] == HeaderElement(Text("Day one"), HeaderLevel.ONE)
    assert blocks[1] == HeaderElement(Text("Later"), HeaderLevel.THREE)
    assert blocks[2] == Paragraph(Text("body"))


def test_block_quote_lines_join():
    assert parse("> first\n> second") == [BlockQuote(Text("first second"))]


def test_unordered_list():
    blocks = parse("- a\n- b\n")
    assert blocks == [
        ListElement(
            ListElementMarker.UNORDERED,
            [[Paragraph(Text("a"))], [Paragraph(Text("b"))]],
        )
    ]
    assert render_html(blocks[0]) == "<ul><li><p>a</p></li><li><p>b</p></li></ul>"


def test_ordered_list_with_continuation():
    blocks = parse("1. first\n   continued\n2. second")
    assert blocks == [
        ListElement(
            ListElementMarker.ORDERED,
            [[Paragraph(Text("first continued"))], [Paragraph(Text("second"))]],
        )
    ]


def test_marker_change_starts_new_list():
    blocks = parse("- a\n1. b")
    assert [b.marker for b in blocks] == [ListElementMarker.UNORDERED, ListElementMarker.ORDERED]


def test_media_lines():
    blocks = parse(
        "![](photos/beach.jpg)\n"
        "![clip](https://example.com/v/clip.MP4?t=3)\n"
        "![](memo.m4a)"
    )
    assert blocks == [
        Image(MediaPath(PurePath("photos/beach.jpg"))),
        Video(MediaLink("https://example.com/v/clip.MP4?t=3")),
        Audio(MediaPath(PurePath("memo.m4a"))),
    ]


def test_inline_markup():
    span = parse_inline("a **b** *c* _d_ ~~e~~")
    assert span == Group([
        Text("a "),
        Strong(Text("b")),
        Text(" "),
        Emphasis(Text("c")),
        Text(" "),
        Emphasis(Text("d")),
        Text(" "),
        Strikethrough(Text("e")),
    ])


def test_nested_inline_markup():
    assert parse_inline("**a ~~b~~**") == Strong(Group([Text("a "), Strikethrough(Text("b"))]))


def test_intraword_underscores_stay_text():
    assert parse_inline("snake_case_name") == Text("snake_case_name")


def test_links():
    assert parse_inline("[home](https://example.com)") == LinkElement(
        UrlLink("https://example.com"), Text("home")
    )
    assert parse_inline("<https://example.com>") == LinkElement(UrlLink("https://example.com"))
    assert parse_inline("[](tag:travel)") == LinkElement(TagLink(TagId("travel")))
    assert parse_inline("with [Al](person:al)") == Group([
        Text("with "),
        LinkElement(PersonLink(PersonId("al")), Text("Al")),
    ])


def test_link_kind_requires_url():
    assert link_kind("place:home") == PlaceLink(PlaceId("home"))
    with pytest.raises(ValueError):
        link_kind("not-a-url")


def test_page_markers():
    assert parse_inline("{{page 3}}") == PhysicalSourcePageBegin(3)
    assert parse_inline("{{page 4 scans/p4.jpg}}text") == Group([
        PhysicalSourcePageBegin(4, MediaPath(PurePath("scans/p4.jpg"))),
        Text("text"),
    ])


def test_empty_body_is_malformed():
    with pytest.raises(MalformedEntry):
        MarkdownParser().parse("\n   \n", "empty")


def test_bad_link_is_malformed():
    """Errors inside the body name the source file."""
    with pytest.raises(MalformedEntry) as exc:
        MarkdownParser().parse("see [x](http://)", "broken")
    assert exc.value.source == "broken"


def test_relative_link_keeps_label_text():
    """A link to another file has no URL; the label stays as plain text."""
    assert parse_inline("see [other](two.md) too") == Group([
        Text("see "),
        Text("other"),
        Text(" too"),
    ])
    assert parse_inline("[](../notes/x.md)") == Text("../notes/x.md")
    blocks = MarkdownParser().parse("one [*two*](two.md)", "one")
    assert render_html(blocks[0]) == "<p>one <em>two</em></p>"
