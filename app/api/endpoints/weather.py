import httpx
from fastapi import APIRouter, Depends, Query

from app.api.deps import get_app_settings, get_history_store, get_http_client
from app.core.config import Settings
from app.core.exceptions import InputMissing
from app.schemas.history import ErrorResponse
from app.schemas.weather import WeatherRecord
from app.services.history import HistoryStore
from app.services.weather.lookup import lookup_weather


router = APIRouter()


@router.get(
    "",
    response_model=WeatherRecord,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def current_weather(
    city: str | None = Query(None),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_app_settings),
    store: HistoryStore = Depends(get_history_store),
):
    if city is None or not city.strip():
        raise InputMissing()
    return await lookup_weather(city.strip(), client=client, settings=settings, store=store)
