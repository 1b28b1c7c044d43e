"""
Escaping helpers. Every piece of user-controlled text or attribute value
leaves the renderer through one of these functions.
"""

from html import escape as _html_escape
from typing import Any

from ..core.model import (
    LinkElementKind,
    MediaLink,
    MediaPath,
    MediaReference,
    PersonLink,
    PlaceLink,
    TagLink,
    UrlLink,
)


def escape_text(value: Any) -> str:
    """Escape text content. Quotes are escaped too so the result is safe anywhere."""
    return _html_escape(str(value), quote=True)


def escape_attr(value: Any) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return _html_escape(str(value), quote=True)


def attr(name: str, value: Any) -> str:
    """` name="value"` with the value escaped (note the leading space)."""
    return f' {name}="{escape_attr(value)}"'


def media_src(ref: MediaReference) -> str:
    """Escaped `src` value for a media reference."""
    match ref:
        case MediaLink(url=url):
            return escape_attr(url.value)
        case MediaPath(path=path):
            return escape_attr(str(path))
        case _:
            raise TypeError(f"Not a media reference: {type(ref).__name__}")


# Link kinds that point into the journal's own side tables.
_REF_CLASSES = {
    TagLink: "tag-ref",
    PlaceLink: "place-ref",
    PersonLink: "person-ref",
}


def link_parts(kind: LinkElementKind) -> tuple[str, str]:
    """
    Opening `<a ...>` tag and the escaped fallback text for a link kind.

    The fallback is used as link text when the link carries no content.
    """
    match kind:
        case UrlLink(url=url):
            return f"<a{attr('href', url.value)}>", escape_attr(url.value)
        case TagLink(tag=target) | PlaceLink(place=target) | PersonLink(person=target):
            css = _REF_CLASSES[type(kind)]
            return f'<a class="{css}"{attr("data-id", target)}>', escape_attr(target)
        case _:
            raise TypeError(f"Not a link kind: {type(kind).__name__}")
