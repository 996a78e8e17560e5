from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class HistoryEntry(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    city: str
    temperature: int
    timestamp: datetime


class HistoryResponse(BaseModel):
    history: list[HistoryEntry]


class ErrorResponse(BaseModel):
    error: str
