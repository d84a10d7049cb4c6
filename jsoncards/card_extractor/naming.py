"""Human-readable labels for card paths and object keys."""
from __future__ import annotations

import re

ROOT_PATH = "$"
ROOT_TITLE = "Root Object"

_CAPITAL = re.compile(r"([A-Z])")


def title_from_key(key: str) -> str:
    """Turn a camelCase or snake_case key into a Title Case label.

    ``userId`` becomes "User Id" and ``first_name`` becomes "First name": a
    space goes before every capital, underscores become spaces, and only the
    first letter is upper-cased.
    """
    text = _CAPITAL.sub(r" \1", key).replace("_", " ")
    if text:
        text = text[0].upper() + text[1:]
    return text.strip()


def title_from_path(path: str) -> str:
    if path == ROOT_PATH:
        return ROOT_TITLE
    return title_from_key(path.split(".")[-1])
