"""Test helpers for zipstamp modules."""

from datetime import date
from pathlib import Path
from zipfile import ZipFile

#: Date pinned by tests that assert exact entry names.
STAMP_DAY = date(2024, 3, 1)


def make_files(folder: Path, names: dict[str, bytes]) -> list[Path]:
    """Create ``folder/<name>`` for every item of *names* and return the paths."""
    folder.mkdir(parents=True, exist_ok=True)
    paths = []
    for name, data in names.items():
        p = folder / name
        p.write_bytes(data)
        paths.append(p)
    return paths


def make_zip(path: Path, entries: dict[str, bytes]) -> Path:
    """Write a small archive holding *entries* in insertion order."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with ZipFile(path, "w") as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return path


def read_zip(path: Path) -> dict[str, bytes]:
    """Return ``{entry name: content}`` in stored order."""
    with ZipFile(path) as zf:
        return {name: zf.read(name) for name in zf.namelist()}
