"""CLI for archivist - render a personal journal to HTML."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .core.journal import Journal
from .core.model import ContentDates, Entry, Paragraph, Text
from .core.text import EntryId
from .runtime import build_runtime


def sample_journal() -> Journal:
    """A one-entry journal, handy for checking the output shape."""
    journal = Journal()
    journal.insert(
        EntryId("wat"),
        Entry(
            title="hay sup",
            subtitle="nuttin much",
            content_dates=ContentDates.now(),
            elements=[Paragraph(Text("asdf"))],
        ),
    )
    return journal


def _write_output(html: str, out: Path | None) -> None:
    if out is None:
        sys.stdout.write(html)
        sys.stdout.write("\n")
    else:
        out.write_text(html, encoding="utf-8")


def cmd_render(args: argparse.Namespace, rt: Any) -> int:
    """Render the journal directory to HTML."""
    journal = rt.archive.load()
    # Rendered in full before any output is written
    html = rt.renderer.render_html(journal)
    _write_output(html, args.out)

    if args.out is not None and not args.quiet:
        print(f"Rendered {len(journal)} entries to {args.out}", file=sys.stderr)
    return 0


def cmd_ls(args: argparse.Namespace, rt: Any) -> int:
    """List entry ids in render order."""
    journal = rt.archive.load()
    for entry_id, entry in journal.items():
        if args.quiet:
            print(entry_id)
        else:
            print(f"{entry_id}\t{entry.title}")
    return 0


def cmd_demo(args: argparse.Namespace, rt: Any) -> int:
    """Render the built-in sample journal."""
    _write_output(rt.renderer.render_html(sample_journal()), args.out)
    return 0


def _configure_logging(verbosity: int, configured: str) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, configured, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="archivist", description="Archivist journal renderer"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/archivist.toml, journal/archivist.toml)",
    )
    parser.add_argument(
        "--journal",
        type=Path,
        default=None,
        help="Path to journal directory (overrides config)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="More logging (repeat for debug)"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # render command
    parser_render = subparsers.add_parser("render", help="Render the journal to HTML")
    parser_render.add_argument(
        "-o", "--out", type=Path, default=None, help="Write to file instead of stdout"
    )

    # ls command
    subparsers.add_parser("ls", help="List entries in render order")

    # demo command
    parser_demo = subparsers.add_parser("demo", help="Render a built-in sample journal")
    parser_demo.add_argument(
        "-o", "--out", type=Path, default=None, help="Write to file instead of stdout"
    )

    args = parser.parse_args(argv)

    handlers = {
        "render": cmd_render,
        "ls": cmd_ls,
        "demo": cmd_demo,
    }

    try:
        rt = build_runtime(
            journal_path=args.journal,
            config_path=args.config,
        )
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    _configure_logging(args.verbose, rt.config.log.level)

    handler = handlers.get(args.cmd)
    if handler:
        try:
            exit_code = handler(args, rt)
            sys.exit(exit_code)
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
