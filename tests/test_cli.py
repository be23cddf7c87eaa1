"""End-to-end tests for the ``zipstamp-cli`` command group."""

import re
from pathlib import Path

from click.testing import CliRunner

from zipstamp.cli import main

from .utils import make_files, make_zip, read_zip

STAMPED = re.compile(r"^batch#\d{8}#(\d+)(\.\w+)?$")


def _invoke(*args: str, input: str | None = None):
    return CliRunner().invoke(main, list(args), input=input)


def test_help_lists_every_command():
    result = _invoke("--help")
    assert result.exit_code == 0
    for cmd in ("append", "clean", "create", "folder", "list"):
        assert cmd in result.output


def test_create_then_list(tmp_path: Path):
    a, b = make_files(tmp_path / "in", {"a.txt": b"A", "b.csv": b"B"})
    out = tmp_path / "out"
    out.mkdir()

    result = _invoke("create", str(a), str(b), "--name", "batch", "--output-dir", str(out))
    assert result.exit_code == 0, result.output

    archives = list(out.glob("batch*.zip"))
    assert len(archives) == 1
    names = list(read_zip(archives[0]))
    assert [STAMPED.match(n).groups() for n in names] == [("1", ".txt"), ("2", ".csv")]
    assert not a.exists() and not b.exists()

    listed = _invoke("list", str(archives[0]))
    assert listed.exit_code == 0, listed.output
    assert "2 entries" in listed.output
    assert names[0] in listed.output


def test_append_numbers_after_existing(tmp_path: Path):
    archive = make_zip(tmp_path / "batch.zip", {"old-1": b"1", "old-2": b"2"})
    (new,) = make_files(tmp_path / "in", {"c.log": b"C"})

    result = _invoke("append", str(archive), str(new))
    assert result.exit_code == 0, result.output

    names = list(read_zip(archive))
    assert len(names) == 3
    assert STAMPED.match(names[0]).groups() == ("3", ".log")
    assert names[1:] == ["old-1", "old-2"]
    assert not list(tmp_path.glob(".batch.zip.*.bak"))


def test_append_keep_backup(tmp_path: Path):
    archive = make_zip(tmp_path / "batch.zip", {"old": b"1"})
    (new,) = make_files(tmp_path / "in", {"c.log": b"C"})

    result = _invoke("append", str(archive), str(new), "--keep-backup")
    assert result.exit_code == 0, result.output
    backups = list(tmp_path.glob(".batch.zip.*.bak"))
    assert len(backups) == 1
    assert read_zip(backups[0]) == {"old": b"1"}
    assert "Backup kept at" in result.output


def test_folder_with_clean(tmp_path: Path):
    folder = tmp_path / "incoming"
    make_files(folder, {"a.txt": b"A", "b.txt": b"B"})

    result = _invoke("folder", str(folder), "--name", "batch", "--clean", "--yes")
    assert result.exit_code == 0, result.output

    assert not folder.exists()
    archives = list(tmp_path.glob("batch*.zip"))
    assert len(archives) == 1
    assert sorted(read_zip(archives[0]).values()) == [b"A", b"B"]


def test_folder_clean_declined_keeps_folder(tmp_path: Path):
    folder = tmp_path / "incoming"
    make_files(folder, {"a.txt": b"A"})

    result = _invoke("folder", str(folder), "--name", "batch", "--clean", input="n\n")
    assert result.exit_code == 1
    assert folder.is_dir()
    assert len(list(folder.glob("batch*.zip"))) == 1


def test_clean_dry_run_keeps_everything(tmp_path: Path):
    folder = tmp_path / "junk"
    make_files(folder, {"x": b"x"})

    result = _invoke("clean", str(folder), "--dry-run")
    assert result.exit_code == 0, result.output
    assert "nothing deleted" in result.output
    assert (folder / "x").exists()


def test_clean_yes_deletes(tmp_path: Path):
    folder = tmp_path / "junk"
    make_files(folder, {"x": b"x", "y": b"y"})

    result = _invoke("clean", str(folder), "--yes")
    assert result.exit_code == 0, result.output
    assert not folder.exists()


def test_clean_refuses_nested_folder(tmp_path: Path):
    folder = tmp_path / "junk"
    make_files(folder / "sub", {"x": b"x"})

    result = _invoke("clean", str(folder), "--yes")
    assert result.exit_code == 1
    assert "CANT DELETE FOLDER" in result.output
    assert (folder / "sub" / "x").exists()


def test_missing_file_reports_not_found(tmp_path: Path):
    result = _invoke("create", str(tmp_path / "ghost.txt"), "--name", "batch")
    assert result.exit_code == 1
    assert "NOT FOUND" in result.output
    assert not list(tmp_path.rglob("*.zip"))


def test_invalid_config_is_a_click_error(tmp_path: Path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("archive:\n  chunk_size: 0\n")

    result = _invoke("-c", str(cfg), "list", str(tmp_path / "x.zip"))
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
