from fastapi import APIRouter

from app.api.endpoints.history import router as history_router
from app.api.endpoints.weather import router as weather_router


api_router = APIRouter()
api_router.include_router(weather_router, prefix="/weather", tags=["weather"])
api_router.include_router(history_router, prefix="/history", tags=["history"])
