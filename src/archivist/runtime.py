"""Runtime wiring helper for CLI applications."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.fs_storage import FsStorage
from .adapters.markdown_parser import MarkdownParser
from .adapters.yaml_codec import MarkdownEntryCodec, YamlFrontmatter
from .config import ArchivistConfig, load_config
from .core.archive import Archive
from .render.html import HtmlRenderer


@dataclass
class Runtime:
    """Container for all wired components."""
    archive: Archive
    renderer: HtmlRenderer
    config: ArchivistConfig


def build_runtime(
    journal_path: Path | None = None,
    config_path: Path | None = None,
) -> Runtime:
    """Build and wire all components for a journal directory."""
    # Load configuration
    config = load_config(config_path=config_path, journal_path=journal_path)

    # Use config values if CLI args not provided
    if journal_path is None:
        journal_path = config.journal.root

    storage = FsStorage(journal_path)
    codec = MarkdownEntryCodec(YamlFrontmatter())
    parser = MarkdownParser()
    archive = Archive(storage, parser, codec)

    renderer = HtmlRenderer(
        max_depth=config.render.max_depth,
        conventional_media_tags=config.render.conventional_media_tags,
        date_format=config.render.date_format,
    )

    return Runtime(
        archive=archive,
        renderer=renderer,
        config=config,
    )
