from typing import Any, Iterable, Protocol, TextIO

from .model import Block
from .nonempty import NonEmpty


class StorageStrategy(Protocol):
    """
    Flat, read-only store: one source file per entry.
    """

    def read_raw(self, name: str) -> str | None:
        pass

    def list_all_names(self) -> Iterable[str]:
        pass


class ParserStrategy(Protocol):
    """
    Parse an entry body into blocks. The result is never empty.
    """

    def parse(self, text: str, source: str) -> NonEmpty[Block]:
        pass


class FrontmatterCodec(Protocol):
    """
    Split optional frontmatter from the body without enforcing a schema.
    """

    def decode(self, text: str) -> tuple[dict[str, Any], str]:
        pass


class EntryCodec(Protocol):
    """
    Compose a FrontmatterCodec with the raw body of an entry file.
    """

    def decode_file(self, text: str, name: str) -> tuple[dict[str, Any], str]:
        pass


class Renderer(Protocol):
    """
    Turns any journal node (span, block, entry or whole journal) into markup.
    """

    def render_html(self, node: Any) -> str:
        pass

    def write_html(self, node: Any, sink: TextIO) -> None:
        pass
