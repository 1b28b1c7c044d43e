"""Tests for the archivist command line."""

import tempfile
from pathlib import Path

import pytest

from archivist import __version__
from archivist.cli import main, sample_journal
from archivist.core.text import EntryId

ENTRY = """---
id: {id}
title: {title}
created: 2019-04-13 20:22:01 +00:00
---

Hello **{title}**.
"""


def run(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    out = capsys.readouterr()
    return exc.value.code, out.out, out.err


def make_journal(root: Path) -> None:
    root.mkdir()
    (root / "first.md").write_text(ENTRY.format(id="b", title="Bee"))
    (root / "second.md").write_text(ENTRY.format(id="a", title="Ay"))


def test_version(capsys):
    code, out, _ = run(["--version"], capsys)
    assert code == 0
    assert out.strip() == f"archivist {__version__}"


def test_render_to_stdout(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        journal_dir = Path(tmpdir) / "journal"
        make_journal(journal_dir)

        code, out, _ = run(["--journal", str(journal_dir), "render"], capsys)

    assert code == 0
    assert out.index('data-id="a"') < out.index('data-id="b"')
    assert "<p>Hello <strong>Ay</strong>.</p>" in out


def test_render_to_file(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        journal_dir = Path(tmpdir) / "journal"
        make_journal(journal_dir)
        out_file = Path(tmpdir) / "out.html"

        code, out, err = run(["--journal", str(journal_dir), "render", "-o", str(out_file)], capsys)

        assert code == 0
        assert out == ""
        assert "Rendered 2 entries" in err
        assert out_file.read_text(encoding="utf-8").startswith('<header data-id="a">')


def test_ls(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        journal_dir = Path(tmpdir) / "journal"
        make_journal(journal_dir)

        code, out, _ = run(["--journal", str(journal_dir), "ls"], capsys)

    assert code == 0
    assert out.splitlines() == ["a\tAy", "b\tBee"]


def test_errors_exit_nonzero(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        journal_dir = Path(tmpdir) / "journal"
        journal_dir.mkdir()
        (journal_dir / "bad.md").write_text("---\ncreated: 2020-01-01\n---\nbody\n")

        code, _, err = run(["--journal", str(journal_dir), "render"], capsys)

    assert code == 1
    assert "Error: bad: missing title" in err


def test_config_applies_to_renderer(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        journal_dir = Path(tmpdir) / "journal"
        make_journal(journal_dir)
        config = Path(tmpdir) / "archivist.toml"
        config.write_text('[render]\ndate_format = "%Y"\n')

        code, out, _ = run(
            ["--config", str(config), "--journal", str(journal_dir), "render"], capsys
        )

    assert code == 0
    assert '<div class="date">2019</div>' in out


def test_demo(capsys):
    code, out, _ = run(["demo"], capsys)
    assert code == 0
    assert out.startswith('<header data-id="wat"><h2>hay sup</h2><div class="subtitle">nuttin much</div>')
    assert out.rstrip().endswith("<article><p>asdf</p></article>")


def test_sample_journal():
    journal = sample_journal()
    assert list(journal) == [EntryId("wat")]
