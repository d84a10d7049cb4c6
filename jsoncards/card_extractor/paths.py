"""Card path helpers.

Paths start at ``$`` and extend with ``.key`` for every object field
descended into. Keys may themselves contain dots, so resolution tries every
way of grouping the remaining segments into a key.
"""
from __future__ import annotations

from typing import Any, List, Optional, Tuple

from jsoncards.card_extractor.errors import PathNotFound
from jsoncards.card_extractor.naming import ROOT_PATH
from jsoncards.card_extractor.values import JsonKind, json_kind


def child_path(parent: str, key: str) -> str:
    if parent == ROOT_PATH:
        return f"{ROOT_PATH}.{key}"
    return f"{parent}.{key}"


def path_segments(path: str) -> List[str]:
    """Split a path into its segments, without the leading ``$``."""
    if path == ROOT_PATH:
        return []
    if not path.startswith(ROOT_PATH + "."):
        raise PathNotFound(path)
    return path[len(ROOT_PATH) + 1:].split(".")


def _resolve_keys(node: Any, segments: List[str]) -> Optional[Tuple[str, ...]]:
    if not segments:
        return ()
    if json_kind(node) is not JsonKind.object:
        return None
    # shortest key first, so plain dotted paths resolve without backtracking
    for size in range(1, len(segments) + 1):
        key = ".".join(segments[:size])
        if key not in node:
            continue
        rest = _resolve_keys(node[key], segments[size:])
        if rest is not None:
            return (key,) + rest
    return None


def resolve_keys(document: Any, path: str) -> Tuple[str, ...]:
    """Return the sequence of object keys a path walks through."""
    keys = _resolve_keys(document, path_segments(path))
    if keys is None:
        raise PathNotFound(path)
    return keys


def get_at_path(document: Any, path: str) -> Any:
    node = document
    for key in resolve_keys(document, path):
        node = node[key]
    return node


def set_at_path(document: Any, path: str, value: Any) -> Any:
    """Return a copy of ``document`` with the subtree at ``path`` replaced.

    Only the objects along the path are copied; untouched siblings are shared
    with the input, which is never mutated.
    """
    keys = resolve_keys(document, path)
    return _replace(document, keys, value)


def _replace(node: Any, keys: Tuple[str, ...], value: Any) -> Any:
    if not keys:
        return value
    head, rest = keys[0], keys[1:]
    updated = dict(node)
    updated[head] = _replace(node[head], rest, value)
    return updated
