from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from zipstamp.utils.naming import (
    NamingPattern,
    archive_base_name,
    build_pattern,
    original_extension,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.txt", ".txt"),
        ("archive.tar.gz", ".gz"),
        ("README", ""),
        (".bashrc", ""),
        ("trailing.", "."),
    ],
)
def test_original_extension(name, expected):
    """Verify the extension runs from the last dot, inclusive."""
    assert original_extension(name) == expected


def test_archive_base_name():
    assert archive_base_name(Path("/x/report.zip")) == "report"
    assert archive_base_name(Path("/x/a.b.zip")) == "a.b"
    assert archive_base_name(Path("/x/noext")) == "noext"


def test_pattern_for_file_uses_parent(tmp_path: Path):
    src = tmp_path / "a.txt"
    src.write_text("x")

    pattern = build_pattern(src, "report", today=date(2024, 3, 1))

    assert pattern.folder == tmp_path
    assert pattern.prefix == str(tmp_path / "report#20240301#")
    assert pattern.name_for(1, ".txt") == tmp_path / "report#20240301#1.txt"


def test_pattern_for_directory_uses_directory(tmp_path: Path):
    folder = tmp_path / "incoming"
    folder.mkdir()

    pattern = build_pattern(folder, "batch", today=date(2023, 12, 31))

    assert pattern.folder == folder.resolve()
    assert pattern.name_for(7) == folder.resolve() / "batch#20231231#7"


def test_pattern_without_folder_has_no_separator():
    """A bare relative file name has no parent to prefix."""
    pattern = build_pattern(Path("loose.txt"), "report", today=date(2024, 3, 1))

    assert pattern.folder is None
    assert pattern.prefix == "report#20240301#"
    assert pattern.name_for(2, ".log") == Path("report#20240301#2.log")


def test_pattern_defaults_to_today(tmp_path: Path):
    before = date.today().strftime("%Y%m%d")
    pattern = build_pattern(tmp_path, "x")
    after = date.today().strftime("%Y%m%d")
    assert pattern.date_stamp in {before, after}


def test_pattern_is_frozen(tmp_path: Path):
    pattern = build_pattern(tmp_path, "x", today=date(2024, 3, 1))
    with pytest.raises(ValidationError):
        pattern.base_name = "y"


def test_pattern_rejects_malformed_stamp():
    with pytest.raises(ValidationError):
        NamingPattern(base_name="x", date_stamp="2024-03-01")
