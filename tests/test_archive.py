import tempfile
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZIP_STORED, ZipFile

import pytest

from zipstamp.pipelines.archive import (
    create_archive,
    create_archive_from_file,
    write_archive,
)
from zipstamp.utils.errors import (
    AlreadyExistsError,
    NotAFileError,
    NotFoundError,
    RenameError,
)

from .utils import STAMP_DAY, make_files, read_zip


def test_create_archive_worked_example(tmp_path: Path):
    files = make_files(tmp_path / "in", {"a.txt": b"alpha", "b.log": b"beta"})
    out = tmp_path / "out"
    out.mkdir()

    res = create_archive(files, "report", output_dir=out, today=STAMP_DAY)

    assert res.archive.parent == out
    assert res.archive.name.startswith("report") and res.archive.suffix == ".zip"
    assert res.entries == 2
    assert res.added == ["report#20240301#1.txt", "report#20240301#2.log"]
    assert read_zip(res.archive) == {
        "report#20240301#1.txt": b"alpha",
        "report#20240301#2.log": b"beta",
    }
    # sources and their renamed copies are gone
    assert list((tmp_path / "in").iterdir()) == []


def test_entry_count_matches_input_and_inputs_deleted(tmp_path: Path):
    """Verify every input becomes one entry and is deleted afterwards."""
    names = {f"file{i}.bin": bytes([i]) * (i + 1) for i in range(6)}
    files = make_files(tmp_path / "in", names)

    res = create_archive(files, "bulk", output_dir=tmp_path, today=STAMP_DAY)

    with ZipFile(res.archive) as zf:
        assert len(zf.infolist()) == len(files)
        assert all(i.compress_type == ZIP_DEFLATED for i in zf.infolist())
    assert not any(f.exists() for f in files)


def test_create_defaults_to_system_temp(tmp_path: Path):
    f, = make_files(tmp_path, {"x.txt": b"x"})
    res = create_archive_from_file(f, "single", today=STAMP_DAY)
    try:
        assert res.archive.parent == Path(tempfile.gettempdir())
        assert res.added == ["single#20240301#1.txt"]
    finally:
        res.archive.unlink()


def test_stored_compression(tmp_path: Path):
    f, = make_files(tmp_path, {"x.txt": b"x" * 1000})
    res = create_archive([f], "s", output_dir=tmp_path, compression="stored", today=STAMP_DAY)
    with ZipFile(res.archive) as zf:
        assert zf.infolist()[0].compress_type == ZIP_STORED


def test_small_chunk_size_streams_large_content(tmp_path: Path):
    payload = bytes(range(256)) * 4096  # 1 MiB
    f, = make_files(tmp_path, {"big.bin": payload})
    res = create_archive([f], "big", output_dir=tmp_path, chunk_size=1000, today=STAMP_DAY)
    assert read_zip(res.archive) == {"big#20240301#1.bin": payload}


def test_missing_input_rejected_before_any_rename(tmp_path: Path):
    present, = make_files(tmp_path, {"ok.txt": b"1"})

    with pytest.raises(NotFoundError):
        create_archive([present, tmp_path / "missing.txt"], "r", output_dir=tmp_path)

    assert present.exists()
    assert not list(tmp_path.glob("*.zip"))


def test_directory_input_rejected(tmp_path: Path):
    (tmp_path / "sub").mkdir()
    with pytest.raises(NotAFileError):
        create_archive_from_file(tmp_path / "sub", "r", output_dir=tmp_path)


def test_empty_file_list_rejected(tmp_path: Path):
    with pytest.raises(ValueError):
        create_archive([], "r", output_dir=tmp_path)


def test_missing_output_dir(tmp_path: Path):
    f, = make_files(tmp_path, {"x.txt": b"x"})
    with pytest.raises(NotFoundError):
        create_archive([f], "r", output_dir=tmp_path / "nope", today=STAMP_DAY)

    # the destination is reserved before anything is renamed
    assert f.read_bytes() == b"x"
    assert not (tmp_path / "r#20240301#1.txt").exists()


def test_write_archive_reports_vanished_file(tmp_path: Path):
    kept, = make_files(tmp_path, {"kept.txt": b"k"})
    dest = tmp_path / "out.zip"

    with pytest.raises(NotFoundError) as exc:
        write_archive([kept, tmp_path / "vanished.txt"], dest)

    assert "vanished.txt" in exc.value.target
    # already-written entries are not rolled back
    assert not kept.exists()


def test_taken_target_refused_before_anything_moves(tmp_path: Path):
    f, = make_files(tmp_path, {"x.txt": b"x"})
    squatter = tmp_path / "r#20240301#1.txt"
    squatter.write_bytes(b"squatter")

    with pytest.raises(AlreadyExistsError):
        create_archive([f], "r", output_dir=tmp_path, today=STAMP_DAY)

    assert f.read_bytes() == b"x"
    assert squatter.read_bytes() == b"squatter"
    assert not list(tmp_path.glob("*.zip"))


def test_rename_failure_releases_reserved_archive(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
):
    f, = make_files(tmp_path / "in", {"x.txt": b"x"})
    out = tmp_path / "out"
    out.mkdir()

    def _denied(src, dst):
        raise PermissionError(13, "Permission denied", str(src))

    monkeypatch.setattr("zipstamp.pipelines.rename._move", _denied)

    with pytest.raises(RenameError):
        create_archive([f], "r", output_dir=out, today=STAMP_DAY)

    assert f.read_bytes() == b"x"
    assert list(out.iterdir()) == []
