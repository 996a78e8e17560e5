from fastapi import APIRouter, Depends

from app.api.deps import get_app_settings, get_history_store
from app.core.config import Settings
from app.schemas.history import ErrorResponse, HistoryResponse
from app.services.history import HistoryStore


router = APIRouter()


@router.get("", response_model=HistoryResponse, responses={500: {"model": ErrorResponse}})
async def search_history(
    settings: Settings = Depends(get_app_settings),
    store: HistoryStore = Depends(get_history_store),
):
    entries = await store.recent(limit=settings.history_limit)
    return HistoryResponse(history=entries)
