import logging
from pathlib import Path

import pytest

from zipstamp.pipelines.folder import zip_folder
from zipstamp.utils.errors import AlreadyExistsError, EmptyFolderError, NotAFolderError

from .utils import STAMP_DAY, make_files, read_zip


def test_zip_folder_archives_every_child(tmp_path: Path):
    folder = tmp_path / "incoming"
    make_files(folder, {"b.log": b"B", "a.txt": b"A", "c": b"C"})

    res = zip_folder(folder, "batch", today=STAMP_DAY)

    assert res.archive.parent == folder.resolve()
    assert res.archive.name.startswith("batch")
    # children are numbered in sorted name order
    assert read_zip(res.archive) == {
        "batch#20240301#1.txt": b"A",
        "batch#20240301#2.log": b"B",
        "batch#20240301#3": b"C",
    }
    # only the archive is left behind
    assert list(folder.iterdir()) == [res.archive]


def test_empty_folder_creates_no_archive(tmp_path: Path):
    folder = tmp_path / "empty"
    folder.mkdir()

    with pytest.raises(EmptyFolderError):
        zip_folder(folder, "batch")

    assert list(folder.iterdir()) == []
    assert not list(tmp_path.rglob("*.zip"))


def test_not_a_folder(tmp_path: Path):
    f, = make_files(tmp_path, {"file.txt": b"x"})
    with pytest.raises(NotAFolderError):
        zip_folder(f, "batch")
    with pytest.raises(NotAFolderError):
        zip_folder(tmp_path / "missing", "batch")


def test_subdirectories_are_skipped(tmp_path: Path, caplog):
    folder = tmp_path / "mixed"
    make_files(folder, {"keep.txt": b"k"})
    (folder / "nested").mkdir()
    (folder / "nested" / "inner.txt").write_bytes(b"i")

    with caplog.at_level(logging.WARNING):
        res = zip_folder(folder, "m", today=STAMP_DAY)

    assert read_zip(res.archive) == {"m#20240301#1.txt": b"k"}
    assert (folder / "nested" / "inner.txt").exists()
    assert "Skipping sub-directory" in caplog.text


def test_only_subdirectories_counts_as_empty(tmp_path: Path):
    folder = tmp_path / "dirs"
    (folder / "a").mkdir(parents=True)

    with pytest.raises(EmptyFolderError):
        zip_folder(folder, "d")
    assert not list(folder.glob("*.zip"))


def test_taken_name_refused_before_anything_moves(tmp_path: Path):
    folder = tmp_path / "incoming"
    make_files(folder, {"a.txt": b"A", "batch#20240301#1.txt": b"old"})
    before = sorted(p.name for p in folder.iterdir())

    with pytest.raises(AlreadyExistsError) as exc:
        zip_folder(folder, "batch", today=STAMP_DAY)

    assert exc.value.target.endswith("batch#20240301#1.txt")
    assert sorted(p.name for p in folder.iterdir()) == before
    assert (folder / "a.txt").read_bytes() == b"A"


def test_file_already_carrying_its_own_name(tmp_path: Path):
    folder = tmp_path / "incoming"
    make_files(folder, {"a.txt": b"A", "batch#20240301#2.txt": b"B"})

    res = zip_folder(folder, "batch", today=STAMP_DAY)

    assert read_zip(res.archive) == {
        "batch#20240301#1.txt": b"A",
        "batch#20240301#2.txt": b"B",
    }
