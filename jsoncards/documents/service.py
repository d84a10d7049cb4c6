"""Service layer for imported JSON documents and their cards (in-memory only)."""
from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from jsoncards.card_extractor import Card, CardType, InvalidInput, PathNotFound, extract_cards, set_at_path
from jsoncards.config import runtime_config
from jsoncards.documents.models import DocumentCreate, DocumentUpdate, ExportPayload, JsonDocument
from jsoncards.documents.repository import DocumentRepository, document_repo_from_env
from jsoncards.preview_renderer import render_preview

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


class DocumentError(Exception):
    """Base document error."""


class DocumentNotFound(DocumentError):
    """Raised when no document is stored under the requested id."""


class CardNotFound(DocumentError):
    """Raised when a document has no card with the requested id."""


class InvalidDocument(DocumentError):
    """Raised when uploaded text or content cannot be turned into cards."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _has_primitive_root(cards: List[Card]) -> bool:
    return any(card.type == CardType.primitive for card in cards)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def serialized_size(content: Any) -> int:
    return len(json.dumps(content, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8"))


def export_filename(title: str) -> str:
    return f"{_WHITESPACE.sub('-', title.lower())}.json"


class JsonDocumentService:
    def __init__(
        self,
        repository: Optional[DocumentRepository] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.repo = repository or document_repo_from_env()
        self._clock = clock or _utc_now

    # --- Documents ---
    def import_text(self, name: str, text: str) -> JsonDocument:
        """Parse uploaded JSON text and store it as a new document."""
        try:
            content = json.loads(text, parse_constant=_reject_constant)
        except ValueError as exc:
            raise InvalidDocument(f"invalid JSON: {exc}") from exc
        return self.create_document(
            DocumentCreate(name=name, content=content, size=len(text.encode("utf-8")))
        )

    def create_document(self, payload: DocumentCreate) -> JsonDocument:
        measured = self._size(payload.content)
        cards = payload.cards if payload.cards is not None else self._extract(payload.content, payload.name)
        document = JsonDocument(
            name=payload.name,
            content=payload.content,
            size=payload.size if payload.size is not None else measured,
            last_modified=payload.last_modified or self._clock(),
            cards=cards,
        )
        created = self.repo.create(document)
        logger.info("Created JSON document %s (%s) with %s cards", created.id, created.name, len(created.cards))
        return created

    def list_documents(self) -> List[JsonDocument]:
        return self.repo.list()

    def get_document(self, document_id: str) -> JsonDocument:
        document = self.repo.get(document_id)
        if not document:
            raise DocumentNotFound(document_id)
        return document

    def update_document(self, document_id: str, patch: DocumentUpdate) -> JsonDocument:
        document = self.get_document(document_id)
        fields = patch.model_fields_set
        updates: Dict[str, Any] = {}
        if "name" in fields and patch.name:
            updates["name"] = patch.name
        if "content" in fields:
            updates["content"] = patch.content
            updates["size"] = self._size(patch.content)
            if patch.cards is None:
                updates["cards"] = self._extract(patch.content, updates.get("name", document.name))
        if patch.cards is not None:
            updates["cards"] = patch.cards
        elif "name" in updates and "content" not in fields and _has_primitive_root(document.cards):
            updates["cards"] = self._extract(document.content, updates["name"])
        updates["last_modified"] = self._clock()
        updated = self.repo.update(document.model_copy(update=updates))
        logger.info("Updated JSON document %s (fields=%s)", document_id, sorted(fields))
        return updated

    def delete_document(self, document_id: str) -> None:
        if not self.repo.delete(document_id):
            raise DocumentNotFound(document_id)
        logger.info("Deleted JSON document %s", document_id)

    def export_document(self, document_id: str) -> ExportPayload:
        document = self.get_document(document_id)
        return ExportPayload(content=document.content, filename=document.name)

    # --- Cards ---
    def list_cards(self, document_id: str, query: Optional[str] = None) -> List[Card]:
        cards = self.get_document(document_id).cards
        if not query:
            return cards
        needle = query.lower()
        return [c for c in cards if needle in c.title.lower() or needle in c.description.lower()]

    def get_card(self, document_id: str, card_id: str) -> Card:
        for card in self.get_document(document_id).cards:
            if card.id == card_id:
                return card
        raise CardNotFound(card_id)

    def warning_count(self, document_id: str) -> int:
        return sum(len(card.warnings) for card in self.get_document(document_id).cards)

    def update_card(self, document_id: str, card_id: str, content: Any) -> JsonDocument:
        """Write edited card content back into its document at the card's path.

        Cards are re-extracted from the merged document, so ids, descriptions
        and warnings of every card reflect the edit.
        """
        document = self.get_document(document_id)
        card = self.get_card(document_id, card_id)
        try:
            merged = set_at_path(document.content, card.path, content)
        except PathNotFound as exc:
            raise CardNotFound(card_id) from exc
        updated = document.model_copy(
            update={
                "content": merged,
                "size": self._size(merged),
                "cards": self._extract(merged, document.name),
                "last_modified": self._clock(),
            }
        )
        self.repo.update(updated)
        logger.info("Merged card %s at %s into JSON document %s", card_id, card.path, document_id)
        return updated

    def export_card(self, document_id: str, card_id: str) -> ExportPayload:
        card = self.get_card(document_id, card_id)
        return ExportPayload(content=card.content, filename=export_filename(card.title))

    def preview_card(self, document_id: str, card_id: str, max_lines: Optional[int] = None) -> str:
        card = self.get_card(document_id, card_id)
        return render_preview(card.content, runtime_config.get_preview_lines() if max_lines is None else max_lines)

    # --- Internal helpers ---
    @staticmethod
    def _extract(content: Any, name: str) -> List[Card]:
        try:
            return extract_cards(content, name)
        except InvalidInput as exc:
            raise InvalidDocument(str(exc)) from exc

    @staticmethod
    def _size(content: Any) -> int:
        try:
            return serialized_size(content)
        except (TypeError, ValueError) as exc:
            raise InvalidDocument(f"content is not serializable: {exc}") from exc


_default_service: Optional[JsonDocumentService] = None


def get_document_service() -> JsonDocumentService:
    global _default_service
    if _default_service is None:
        _default_service = JsonDocumentService()
    return _default_service


def set_document_service(service: JsonDocumentService) -> None:
    global _default_service
    _default_service = service
