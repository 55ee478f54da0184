"""
Environment variable loading for Balance View.

- LOG_LEVEL: DEBUG | INFO | WARNING | ERROR (default: INFO)
- LOG_FORMAT: json | console (default: json)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is balance_view/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"
LOG_FORMATS = ("json", "console")


def load_view_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides the process env."""
    load_dotenv(_ENV_PATH, override=False)


def get_log_level() -> str:
    """
    Return LOG_LEVEL from env, upper-cased.
    Unknown names fall back to INFO.
    """
    load_view_env()
    raw = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if raw in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return raw
    if raw == "WARN":
        return "WARNING"
    return DEFAULT_LOG_LEVEL


def get_log_format() -> str:
    """Return LOG_FORMAT from env: json | console. Default: json."""
    load_view_env()
    raw = (os.getenv("LOG_FORMAT") or DEFAULT_LOG_FORMAT).strip().lower()
    return raw if raw in LOG_FORMATS else DEFAULT_LOG_FORMAT
