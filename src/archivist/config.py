"""Configuration loader for archivist.toml."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from .render.html import DEFAULT_MAX_DEPTH, check_max_depth

CONFIG_FILENAME = "archivist.toml"


@dataclass
class JournalConfig:
    """Where journal source files live."""
    root: Path = Path("./journal")


@dataclass
class RenderConfig:
    """HTML renderer options."""
    max_depth: int = DEFAULT_MAX_DEPTH
    conventional_media_tags: bool = False
    date_format: str | None = None


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "WARNING"


@dataclass
class ArchivistConfig:
    """Complete archivist configuration."""
    journal: JournalConfig = field(default_factory=JournalConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    log: LogConfig = field(default_factory=LogConfig)


def load_config(config_path: Path | None = None, journal_path: Path | None = None) -> ArchivistConfig:
    """
    Load configuration from archivist.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/archivist.toml
    3. journal_path/archivist.toml

    Args:
        config_path: Explicit path to config file
        journal_path: Journal directory for fallback search

    Returns:
        ArchivistConfig with resolved settings
    """
    toml_data: dict[str, Any] = {}

    # Search for config file
    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / CONFIG_FILENAME)
    if journal_path:
        search_paths.append(journal_path / CONFIG_FILENAME)

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            break

    # Parse journal config
    journal_data = toml_data.get("journal", {})
    journal_config = JournalConfig(
        root=Path(journal_data.get("root", journal_path or Path("./journal"))),
    )

    # Parse render config
    render_data = toml_data.get("render", {})
    max_depth = int(render_data.get("max_depth", DEFAULT_MAX_DEPTH))
    try:
        check_max_depth(max_depth)
    except ValueError as e:
        raise ValueError(f"render.{e}") from e
    conventional = render_data.get("conventional_media_tags", False)
    if not isinstance(conventional, bool):
        raise ValueError(
            f"render.conventional_media_tags must be true or false, got {conventional!r}"
        )
    render_config = RenderConfig(
        max_depth=max_depth,
        conventional_media_tags=conventional,
        date_format=render_data.get("date_format"),
    )

    # Parse log config
    log_data = toml_data.get("log", {})
    log_config = LogConfig(
        level=str(log_data.get("level", "WARNING")).upper(),
    )

    return ArchivistConfig(
        journal=journal_config,
        render=render_config,
        log=log_config,
    )
