"""FastAPI routes for JSON documents and their cards."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, Response

from jsoncards.common.error_envelope import error_response, not_found_error
from jsoncards.config import runtime_config
from jsoncards.documents.models import (
    CardExportRequest,
    CardPreview,
    CardUpdate,
    DocumentCreate,
    DocumentImport,
    DocumentUpdate,
)
from jsoncards.documents.service import CardNotFound, DocumentNotFound, InvalidDocument, get_document_service

router = APIRouter(prefix="/api/json-files", tags=["json_files"])


def _raise_for(exc: Exception) -> None:
    if isinstance(exc, DocumentNotFound):
        not_found_error("json_file", str(exc))
    if isinstance(exc, CardNotFound):
        not_found_error("card", str(exc))
    if isinstance(exc, InvalidDocument):
        error_response(code="json_file.invalid", message=str(exc), status_code=400, resource_kind="json_file")
    raise exc


@router.get("")
def list_documents():
    return get_document_service().list_documents()


@router.post("", status_code=201)
def create_document(payload: DocumentCreate):
    try:
        return get_document_service().create_document(payload)
    except InvalidDocument as exc:
        _raise_for(exc)


@router.post("/import", status_code=201)
def import_document(payload: DocumentImport):
    try:
        return get_document_service().import_text(payload.name, payload.text)
    except InvalidDocument as exc:
        _raise_for(exc)


@router.get("/{document_id}")
def get_document(document_id: str):
    try:
        return get_document_service().get_document(document_id)
    except DocumentNotFound as exc:
        _raise_for(exc)


@router.patch("/{document_id}")
def update_document(document_id: str, payload: DocumentUpdate):
    try:
        return get_document_service().update_document(document_id, payload)
    except (DocumentNotFound, InvalidDocument) as exc:
        _raise_for(exc)


@router.delete("/{document_id}", status_code=204)
def delete_document(document_id: str):
    try:
        get_document_service().delete_document(document_id)
    except DocumentNotFound as exc:
        _raise_for(exc)
    return Response(status_code=204)


@router.get("/{document_id}/export")
def export_document(document_id: str):
    try:
        return get_document_service().export_document(document_id)
    except DocumentNotFound as exc:
        _raise_for(exc)


@router.get("/{document_id}/cards")
def list_cards(document_id: str, q: Optional[str] = None):
    service = get_document_service()
    try:
        cards = service.list_cards(document_id, q)
        warnings = service.warning_count(document_id)
    except DocumentNotFound as exc:
        _raise_for(exc)
    return {"cards": cards, "total_warnings": warnings}


@router.get("/{document_id}/cards/{card_id}/preview")
def preview_card(
    document_id: str,
    card_id: str,
    max_lines: Optional[int] = Query(None, ge=0, le=1000),
    expanded: bool = False,
):
    if max_lines is not None:
        lines = max_lines
    else:
        lines = runtime_config.get_expanded_lines() if expanded else runtime_config.get_preview_lines()
    try:
        preview = get_document_service().preview_card(document_id, card_id, lines)
    except (DocumentNotFound, CardNotFound) as exc:
        _raise_for(exc)
    return CardPreview(card_id=card_id, max_lines=lines, preview=preview)


@router.put("/{document_id}/cards/{card_id}")
def update_card(document_id: str, card_id: str, payload: CardUpdate):
    try:
        return get_document_service().update_card(document_id, card_id, payload.content)
    except (DocumentNotFound, CardNotFound) as exc:
        _raise_for(exc)
    except InvalidDocument as exc:
        error_response(code="card.invalid_content", message=str(exc), status_code=400, resource_kind="card")


@router.post("/{document_id}/export-card")
def export_card(document_id: str, payload: CardExportRequest):
    try:
        return get_document_service().export_card(document_id, payload.card_id)
    except (DocumentNotFound, CardNotFound) as exc:
        _raise_for(exc)
