"""Utility functions for archivist."""

import unicodedata
from datetime import datetime


def normalize_identifier(text: str) -> str:
    """
    Canonical form of an identifier.

    - Unicode normalize (NFC) so composed and decomposed spellings agree
    - Strip leading/trailing whitespace

    Examples:
        >>> normalize_identifier("  wat ")
        'wat'
        >>> normalize_identifier("cafe\\u0301") == "caf\\u00e9"
        True
    """
    text = unicodedata.normalize("NFC", text)
    return text.strip()


def format_timestamp(value: datetime, fmt: str | None = None) -> str:
    """
    Display form of an aware timestamp.

    Without `fmt` the layout is `YYYY-MM-DD HH:MM:SS[.ffffff] +HH:MM`,
    e.g. `2019-04-13 20:22:01 +00:00`. With `fmt` it is plain strftime.
    """
    if fmt is not None:
        return value.strftime(fmt)

    text = value.strftime("%Y-%m-%d %H:%M:%S")
    if value.microsecond:
        text += f".{value.microsecond:06d}"

    offset = value.utcoffset()
    if offset is None:
        return text

    total = int(offset.total_seconds())
    sign = "-" if total < 0 else "+"
    hours, rest = divmod(abs(total), 3600)
    minutes = rest // 60
    return f"{text} {sign}{hours:02d}:{minutes:02d}"
