"""Runtime configuration helpers for the card engines."""
from __future__ import annotations

import os
from typing import Optional

DEFAULT_MAX_DEPTH = 3
DEFAULT_PREVIEW_LINES = 6
DEFAULT_EXPANDED_LINES = 50
DEFAULT_BACKEND = "memory"


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


def _get_int(name: str, default: int, minimum: int = 0) -> int:
    raw = _get_env(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def get_max_depth() -> int:
    return _get_int("JSON_CARDS_MAX_DEPTH", DEFAULT_MAX_DEPTH)


def get_preview_lines() -> int:
    return _get_int("JSON_CARDS_PREVIEW_LINES", DEFAULT_PREVIEW_LINES)


def get_expanded_lines() -> int:
    return _get_int("JSON_CARDS_EXPANDED_LINES", DEFAULT_EXPANDED_LINES, minimum=11)


def get_documents_backend() -> str:
    return (_get_env("JSON_CARDS_BACKEND") or DEFAULT_BACKEND).lower()
