"""
zipstamp: rename files to ``<name>#<yyyyMMdd>#<n><ext>`` and store them in ZIP
archives.

The archive operations live in :mod:`zipstamp.pipelines`; the command line
front-end in :mod:`zipstamp.cli`.  Only the version string and the
configuration loader are exposed here.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("zipstamp")
except PackageNotFoundError:
    # Running from a checkout that was never installed.
    __version__ = "0.0.0"

from .config import load_config  # noqa: E402

__all__: list[str] = ["load_config", "__version__"]
