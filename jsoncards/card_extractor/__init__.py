"""Card extractor engine."""

from jsoncards.card_extractor.errors import CardExtractionError, InvalidInput, PathNotFound
from jsoncards.card_extractor.extractor import card_id_for_path, extract_cards
from jsoncards.card_extractor.paths import get_at_path, set_at_path
from jsoncards.card_extractor.schemas import Card, CardType
from jsoncards.card_extractor.values import JsonKind, json_kind

__all__ = [
    "Card",
    "CardType",
    "CardExtractionError",
    "InvalidInput",
    "PathNotFound",
    "JsonKind",
    "json_kind",
    "card_id_for_path",
    "extract_cards",
    "get_at_path",
    "set_at_path",
]
