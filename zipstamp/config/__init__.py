"""YAML settings for zipstamp: :func:`load_config` and :class:`ConfigSchema`."""

from .loader import load_config  # noqa: F401
from .schema import ArchiveSettings, ConfigSchema, RenameSettings  # noqa: F401

__all__: list[str] = ["load_config", "ConfigSchema", "ArchiveSettings", "RenameSettings"]
