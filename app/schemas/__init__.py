from __future__ import annotations

from app.schemas.history import ErrorResponse, HistoryEntry, HistoryResponse
from app.schemas.weather import Location, RawObservation, WeatherRecord

__all__ = [
    "ErrorResponse",
    "HistoryEntry",
    "HistoryResponse",
    "Location",
    "RawObservation",
    "WeatherRecord",
]
