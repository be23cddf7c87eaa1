"""
Pydantic models that mirror the YAML configuration consumed by *zipstamp*.

The classes in this module define a strongly-typed representation of the
configuration file so that the rest of the codebase can work with validated
objects instead of ad-hoc dictionaries.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

# --------------------------------------------------------------------------- #
# 1.  Sections                                                                #
# --------------------------------------------------------------------------- #


class ArchiveSettings(BaseModel):
    """How archives are written.

    Attributes:
        compression: ``deflated`` (default) or ``stored``.
        chunk_size:  Streaming buffer size in bytes.
        keep_backup: Leave the pre-append archive on disk after a successful
                     append.
        output_dir:  Folder receiving archives built from loose files.
                     ``None`` uses the system temporary directory.
    """

    compression: Literal["deflated", "stored"] = "deflated"
    chunk_size: int = Field(64 * 1024, gt=0)
    keep_backup: bool = False
    output_dir: Optional[Path] = None

    @field_validator("output_dir", mode="after")
    @classmethod
    def _expand(cls, value: Optional[Path]) -> Optional[Path]:
        """Expand ``~`` so YAML files can use home-relative folders."""
        return value.expanduser() if value is not None else None


class RenameSettings(BaseModel):
    """How source files are renamed before archiving.

    Attributes:
        strict: Raise on the first failed rename.  ``False`` restores the
                best-effort behaviour where failures are only logged.
    """

    strict: bool = True


# --------------------------------------------------------------------------- #
# 2.  Top-level model – complete validated config                             #
# --------------------------------------------------------------------------- #


class ConfigSchema(BaseModel):
    """Root configuration object consumed by the rest of *zipstamp*.

    Attributes:
        version: Version string of the configuration schema.
        archive: Archive writing options.
        rename:  Rename policy.
    """

    version: str = "1.0"
    archive: ArchiveSettings = Field(default_factory=ArchiveSettings)
    rename: RenameSettings = Field(default_factory=RenameSettings)

    def pipeline_kwargs(self) -> dict:
        """Return the keyword arguments shared by every pipeline entry point."""
        return {
            "compression": self.archive.compression,
            "chunk_size": self.archive.chunk_size,
            "strict_rename": self.rename.strict,
        }
