from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from jsoncards.card_extractor.schemas import Card


def _now() -> datetime:
    return datetime.now(timezone.utc)


class JsonDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str
    content: Any = None
    size: int = 0
    last_modified: datetime = Field(default_factory=_now, alias="lastModified")
    cards: List[Card] = Field(default_factory=list)


class DocumentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    content: Any
    size: Optional[int] = Field(default=None, ge=0)
    last_modified: Optional[datetime] = Field(default=None, alias="lastModified")
    cards: Optional[List[Card]] = None


class DocumentImport(BaseModel):
    name: str = Field(min_length=1)
    text: str


class DocumentUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    content: Any = None
    cards: Optional[List[Card]] = None


class CardUpdate(BaseModel):
    content: Any


class CardExportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    card_id: str = Field(alias="cardId")


class ExportPayload(BaseModel):
    content: Any = None
    filename: str


class CardPreview(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    card_id: str = Field(alias="cardId")
    max_lines: int = Field(alias="maxLines")
    preview: str
