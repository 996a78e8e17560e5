from __future__ import annotations

import httpx
from fastapi import Request

from app.core.config import Settings
from app.services.history import HistoryStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    client = getattr(request.app.state, "http_client", None)
    if client is None:
        raise RuntimeError("HTTP client not initialized. Did you start the FastAPI app?")
    return client


def get_history_store(request: Request) -> HistoryStore:
    store = getattr(request.app.state, "history_store", None)
    if store is None:
        raise RuntimeError("History store not initialized. Did you start the FastAPI app?")
    return store
