"""
YAML configuration loader.

This helper locates, reads and validates the *zipstamp.yaml* configuration
before returning a :class:`zipstamp.config.schema.ConfigSchema` instance.

Search precedence (first match wins)
1. An explicit path argument (``--config`` on the CLI).
2. The file named by ``$ZIPSTAMP_CONFIG``.
3. ``./zipstamp.yaml`` in the current working directory.
4. The packaged default shipped inside the wheel.

All resolution logic is concentrated here so the rest of *zipstamp* treats
configuration as an already-validated object.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from importlib.resources import as_file, files

from .schema import ConfigSchema

# --------------------------------------------------------------------------- #
# Wheel-internal fallback (works even from a zipped wheel)                    #
# --------------------------------------------------------------------------- #
try:
    _DEFAULT_CONFIG = files("zipstamp.resources") / "default_config.yaml"
except ModuleNotFoundError:
    _DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "resources" / "default_config.yaml"

ENV_VAR = "ZIPSTAMP_CONFIG"
LOCAL_NAME = "zipstamp.yaml"

# --------------------------------------------------------------------------- #
# Helper functions                                                            #
# --------------------------------------------------------------------------- #


def _first_existing(*candidates: Optional[Path]) -> Optional[Path]:
    """Return the first path in *candidates* that exists on disk."""
    for p in candidates:
        if p is not None and p.exists():
            return p
    return None


def _load_yaml(path: Path) -> dict:
    """Read a YAML file; an empty document yields an empty dict."""
    return yaml.safe_load(path.read_text()) or {}


def _resolve_yaml(explicit: Optional[Path]) -> Path:
    """Resolve the configuration path according to the documented precedence.

    Raises:
        FileNotFoundError: If *explicit* is given but does not exist.
    """
    if explicit is not None:
        if not explicit.exists():
            raise FileNotFoundError(f"Configuration file not found: {explicit}")
        return explicit

    env = os.environ.get(ENV_VAR)
    env_path = Path(env).expanduser().resolve() if env else None
    resolved = _first_existing(env_path, Path.cwd() / LOCAL_NAME)
    if resolved is None:
        with as_file(_DEFAULT_CONFIG) as p:
            resolved = p
    return resolved


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #
def load_config(*, config_path: Optional[str | Path] = None) -> ConfigSchema:
    """Return a fully validated :class:`ConfigSchema`.

    Args:
        config_path: Explicit path to a YAML file. ``None`` triggers the
            search sequence described in the module doc-string.

    Returns:
        A :class:`ConfigSchema` object ready for downstream use.

    Raises:
        FileNotFoundError: When *config_path* is given but missing.
        RuntimeError: When the YAML cannot be parsed or fails validation.
    """
    explicit = Path(config_path).expanduser().resolve() if config_path else None
    path = _resolve_yaml(explicit)

    try:
        return ConfigSchema(**_load_yaml(path))
    except Exception as exc:  # pydantic.ValidationError or YAML issues
        raise RuntimeError(f"Invalid configuration – {exc}") from exc
