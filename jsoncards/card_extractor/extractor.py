"""Card extractor.

Walks a parsed JSON document and produces one card per non-empty object and
per array, in pre-order, down to a fixed depth. Arrays are leaves: their
elements are shown through previews rather than decomposed into cards.
"""
from __future__ import annotations

import hashlib
import logging
from typing import Any, List, Optional

from jsoncards.card_extractor.errors import InvalidInput
from jsoncards.card_extractor.naming import ROOT_PATH, title_from_path
from jsoncards.card_extractor.paths import child_path
from jsoncards.card_extractor.schemas import Card, CardType
from jsoncards.card_extractor.values import (
    CONTAINER_KINDS,
    JsonKind,
    contains_null,
    is_serializable,
    json_kind,
)
from jsoncards.config import runtime_config

logger = logging.getLogger(__name__)

ROOT_CARD_ID = "root"
CARD_ID_LENGTH = 8

WARNING_EMPTY_ARRAY = "Empty array"
WARNING_EMPTY_OBJECT = "Empty object"
WARNING_NULL_VALUES = "Contains null values"


def card_id_for_path(path: str) -> str:
    return hashlib.sha1(path.encode("utf-8")).hexdigest()[:CARD_ID_LENGTH]


def card_warnings(content: Any) -> List[str]:
    warnings: List[str] = []
    kind = json_kind(content)
    if kind is JsonKind.array and len(content) == 0:
        warnings.append(WARNING_EMPTY_ARRAY)
    if kind is JsonKind.object and len(content) == 0:
        warnings.append(WARNING_EMPTY_OBJECT)
    if kind in CONTAINER_KINDS and contains_null(content):
        warnings.append(WARNING_NULL_VALUES)
    return warnings


def extract_cards(document: Any, label: Optional[str], max_depth: Optional[int] = None) -> List[Card]:
    """Decompose a parsed JSON document into cards.

    A primitive root yields a single card titled with ``label``. Otherwise
    every array and every non-empty object reachable through object fields
    gets a card, parents before children, until the nesting depth passes
    ``max_depth``.
    """
    depth_limit = runtime_config.get_max_depth() if max_depth is None else max_depth
    if depth_limit < 0:
        raise InvalidInput(f"max_depth must be non-negative, got {depth_limit}")

    kind = json_kind(document)
    if kind not in CONTAINER_KINDS:
        if not label:
            raise InvalidInput("a label is required for a primitive root")
        return [
            Card(
                id=ROOT_CARD_ID,
                title=label,
                description="Root value",
                path=ROOT_PATH,
                content=document,
                type=CardType.primitive,
                is_valid=is_serializable(document),
                warnings=[],
            )
        ]

    cards: List[Card] = []
    _walk(document, ROOT_PATH, 0, depth_limit, cards)
    logger.debug("Extracted %s cards from %r (max_depth=%s)", len(cards), label, depth_limit)
    return cards


def _walk(node: Any, path: str, depth: int, max_depth: int, cards: List[Card]) -> None:
    if depth > max_depth:
        return

    kind = json_kind(node)
    if kind is JsonKind.array:
        cards.append(_make_card(node, path, CardType.array, f"Array with {len(node)} items"))
        return

    if kind is not JsonKind.object:
        return

    if node:
        cards.append(_make_card(node, path, CardType.object, f"Object with {len(node)} properties"))

    for key, value in node.items():
        if json_kind(value) in CONTAINER_KINDS:
            _walk(value, child_path(path, key), depth + 1, max_depth, cards)


def _make_card(content: Any, path: str, card_type: CardType, description: str) -> Card:
    return Card(
        id=card_id_for_path(path),
        title=title_from_path(path),
        description=description,
        path=path,
        content=content,
        type=card_type,
        is_valid=is_serializable(content),
        warnings=card_warnings(content),
    )
