"""
Public façade for the *pipelines* sub-package.

This module exposes the high-level helpers used by the CLI and by other
callers:

* **Create**
    * :func:`create_archive` / :func:`create_archive_from_file`
    * :func:`write_archive` (no rename step)

* **Append**
    * :func:`append_to_archive` / :func:`append_file_to_archive`

* **Folder**
    * :func:`zip_folder`

* **Inspection and shared value objects**
    * :func:`list_entries`, :func:`count_entries`
    * :class:`ArchiveResult`, :class:`ArchiveEntry`, :class:`NamingPattern`

Importing from ``zipstamp.pipelines`` rather than individual modules keeps
call-sites stable even when underlying filenames change.
"""

from __future__ import annotations

from zipstamp.utils.naming import NamingPattern
from .types import ArchiveEntry, ArchiveResult
from .rename import rename_files
from .archive import create_archive, create_archive_from_file, write_archive
from .append import append_file_to_archive, append_to_archive
from .folder import zip_folder
from .listing import count_entries, list_entries

__all__: list[str] = [
    # create
    "create_archive",
    "create_archive_from_file",
    "write_archive",
    # append
    "append_to_archive",
    "append_file_to_archive",
    # folder
    "zip_folder",
    # building blocks
    "rename_files",
    "list_entries",
    "count_entries",
    # value objects
    "ArchiveEntry",
    "ArchiveResult",
    "NamingPattern",
]
