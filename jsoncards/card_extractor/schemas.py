"""Card extractor schemas."""
from __future__ import annotations

from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class CardType(str, Enum):
    object = "object"
    array = "array"
    primitive = "primitive"


class Card(BaseModel):
    """An addressable view onto one subtree of a JSON document."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    path: str
    content: Any = None
    type: CardType
    is_valid: bool = Field(default=True, alias="isValid")
    warnings: List[str] = Field(default_factory=list)
