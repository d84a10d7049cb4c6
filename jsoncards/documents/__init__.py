"""Imported JSON documents and their card lists."""

from jsoncards.documents.models import DocumentCreate, DocumentUpdate, JsonDocument
from jsoncards.documents.repository import DocumentRepository, InMemoryDocumentRepository
from jsoncards.documents.service import (
    CardNotFound,
    DocumentError,
    DocumentNotFound,
    InvalidDocument,
    JsonDocumentService,
)

__all__ = [
    "JsonDocument",
    "DocumentCreate",
    "DocumentUpdate",
    "DocumentRepository",
    "InMemoryDocumentRepository",
    "JsonDocumentService",
    "DocumentError",
    "DocumentNotFound",
    "CardNotFound",
    "InvalidDocument",
]
