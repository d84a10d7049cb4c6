"""Aggregate app for the JSON card engines."""
from __future__ import annotations

from fastapi import FastAPI

from jsoncards import __version__
from jsoncards.common.health import router as health_router
from jsoncards.documents.routes import router as documents_router


def create_app() -> FastAPI:
    app = FastAPI(title="JSON Cards", version=__version__)
    app.include_router(health_router)
    app.include_router(documents_router)
    return app


app = create_app()
