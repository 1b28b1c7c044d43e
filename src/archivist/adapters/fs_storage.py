from pathlib import Path
from typing import Iterable
from ..core.ports import StorageStrategy


class FsStorage(StorageStrategy):
    def __init__(self, root: Path, suffix: str = ".md"):
        self.root = root
        self.suffix = suffix

    def _path(self, name: str) -> Path:
        return self.root / f"{name}{self.suffix}"

    def read_raw(self, name: str) -> str | None:
        p = self._path(name)
        return p.read_text(encoding="utf-8") if p.is_file() else None

    def list_all_names(self) -> Iterable[str]:
        if not self.root.exists():
            return []
        return sorted(p.stem for p in self.root.glob(f"*{self.suffix}") if p.is_file())
