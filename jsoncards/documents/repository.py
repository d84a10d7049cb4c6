from __future__ import annotations

from typing import Dict, List, Optional, Protocol

from jsoncards.config import runtime_config
from jsoncards.documents.models import JsonDocument


class DocumentRepository(Protocol):
    def create(self, document: JsonDocument) -> JsonDocument: ...
    def get(self, document_id: str) -> Optional[JsonDocument]: ...
    def list(self) -> List[JsonDocument]: ...
    def update(self, document: JsonDocument) -> JsonDocument: ...
    def delete(self, document_id: str) -> bool: ...


class InMemoryDocumentRepository:
    """Plain dict keyed by document id; iteration follows insertion order."""

    def __init__(self) -> None:
        self._items: Dict[str, JsonDocument] = {}

    def create(self, document: JsonDocument) -> JsonDocument:
        self._items[document.id] = document
        return document

    def get(self, document_id: str) -> Optional[JsonDocument]:
        return self._items.get(document_id)

    def list(self) -> List[JsonDocument]:
        return list(self._items.values())

    def update(self, document: JsonDocument) -> JsonDocument:
        self._items[document.id] = document
        return document

    def delete(self, document_id: str) -> bool:
        return self._items.pop(document_id, None) is not None


def document_repo_from_env() -> DocumentRepository:
    backend = runtime_config.get_documents_backend()
    if backend != "memory":
        raise RuntimeError(f"unsupported JSON_CARDS_BACKEND: {backend}")
    return InMemoryDocumentRepository()
