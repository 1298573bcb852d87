"""Load defaults and output strings from config.yml."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

# Resolved against the working directory unless an absolute path is given
_CONFIG_PATH = Path(os.environ.get("DOMAIN_CHECKER_CONFIG_PATH", "config.yml"))

_cache: dict | None = None


def _load() -> dict:
    global _cache
    if _cache is None:
        with open(_CONFIG_PATH) as f:
            _cache = yaml.safe_load(f) or {}
    return _cache


def get_defaults() -> dict:
    """Return the defaults section, or empty dict if config is unavailable."""
    try:
        return _load().get("defaults") or {}
    except (FileNotFoundError, OSError):
        return {}


def get_output_strings() -> dict[str, str]:
    """Return the output section, or empty dict if config is unavailable."""
    try:
        return _load().get("output") or {}
    except (FileNotFoundError, OSError):
        return {}
