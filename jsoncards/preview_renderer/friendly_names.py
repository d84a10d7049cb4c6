"""Display names for common technical keys."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from jsoncards.card_extractor.naming import title_from_key

FRIENDLY_NAMES: Mapping[str, str] = MappingProxyType({
    "id": "ID Number",
    "user_id": "User ID",
    "userId": "User ID",
    "name": "Name",
    "firstName": "First Name",
    "first_name": "First Name",
    "lastName": "Last Name",
    "last_name": "Last Name",
    "email": "Email",
    "phone": "Phone",
    "address": "Address",
    "created_at": "Created Date",
    "createdAt": "Created Date",
    "updated_at": "Updated Date",
    "updatedAt": "Updated Date",
    "price": "Price",
    "amount": "Amount",
    "quantity": "Quantity",
    "status": "Status",
    "isActive": "Is Active",
    "is_active": "Is Active",
})


def friendly_name(key: str) -> str:
    return FRIENDLY_NAMES.get(key) or title_from_key(key)
