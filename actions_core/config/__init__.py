"""Unified configuration layer for destinations.

Merge order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by ACTIONS_CONFIG_FILE
    3. Environment variables, ``ACTIONS_<DESTINATION>_<FIELD>``
    4. In-code overrides passed to the helper

External config file example::

    yahoo_audiences:
      taxonomy_base_url: https://datax.yahooapis.com
      parent_node: SEGMENT

Public API
----------
* get_destination_config(destination: str, overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import os

import yaml

from .defaults import (
    YAHOO_AUDIENCES_DEFAULT_PARENT_NODE,
    YAHOO_AUDIENCES_TAXONOMY_APPEND_PATH,
    YAHOO_AUDIENCES_TAXONOMY_BASE_URL,
)
from .env import get_env_var_name

CONFIG_FILE_ENV = "ACTIONS_CONFIG_FILE"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "yahoo_audiences": {
        "taxonomy_base_url": YAHOO_AUDIENCES_TAXONOMY_BASE_URL,
        "taxonomy_append_path": YAHOO_AUDIENCES_TAXONOMY_APPEND_PATH,
        "parent_node": YAHOO_AUDIENCES_DEFAULT_PARENT_NODE,
    },
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None


def _load_external_config() -> Dict[str, Any]:
    """Load the external config file once per path (YAML, which also covers JSON)."""
    global _FILE_CACHE, _FILE_CACHE_PATH
    path = os.getenv(CONFIG_FILE_ENV) or ""
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    data: Any = {}
    p = Path(path) if path else None
    if p is not None and p.is_file():
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    _FILE_CACHE_PATH = path
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the cached external config file."""
    global _FILE_CACHE, _FILE_CACHE_PATH
    _FILE_CACHE = None
    _FILE_CACHE_PATH = None


def _env_overrides(destination: str, fields) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field in fields:
        val = os.getenv(get_env_var_name(destination, field))
        if val is not None:
            out[field] = val
    return out


def get_destination_config(destination: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a destination.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    Only keys known from defaults or the config file are looked up in the
    environment; credentials are resolved separately via ``config.env``.
    """
    name = (destination or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name, list(cfg))

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


__all__ = [
    "get_destination_config",
    "reset_config_cache",
    "DEFAULTS",
    "CONFIG_FILE_ENV",
]
