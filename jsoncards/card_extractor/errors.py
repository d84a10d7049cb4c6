"""Errors raised by the card extractor."""
from __future__ import annotations


class CardExtractionError(Exception):
    """Base card extractor error."""


class InvalidInput(CardExtractionError):
    """Raised when the document or its label cannot be extracted from."""


class PathNotFound(CardExtractionError):
    """Raised when a card path does not resolve inside a document."""

    def __init__(self, path: str) -> None:
        super().__init__(f"path not found: {path}")
        self.path = path
