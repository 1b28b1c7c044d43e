import re, io
import yaml
from typing import Any
from ..core.ports import FrontmatterCodec, EntryCodec

_FM = re.compile(r"^\s*---\s*\n(.*?)\n---\s*\n?", re.DOTALL)


class YamlFrontmatter(FrontmatterCodec):
    def decode(self, text: str) -> tuple[dict[str, Any], str]:
        m = _FM.match(text)
        if not m:
            return {}, text
        try:
            fm = yaml.safe_load(io.StringIO(m.group(1))) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError("Frontmatter must be a mapping")
        body = text[m.end() :]
        return (fm, body)


class MarkdownEntryCodec(EntryCodec):
    def __init__(self, fm: YamlFrontmatter):
        self.fm = fm

    def decode_file(self, text: str, name: str) -> tuple[dict[str, Any], str]:
        meta, body = self.fm.decode(text)
        # The file name stands in for the id unless the frontmatter names one
        meta.setdefault("id", name)
        return meta, body
