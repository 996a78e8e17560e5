from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    latitude: float
    longitude: float
    display_name: str


class RawObservation(BaseModel):
    temperature_c: float | None = Field(None, description="Air temperature (C).")
    humidity_pct: float | None = Field(None, description="Relative humidity (%).")
    wind_speed_mps: float | None = Field(None, description="Wind speed (m/s).")
    description: str | None = Field(None, description="Text description of conditions.")


class WeatherRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    city: str
    temperature: int = Field(..., description="Air temperature (F), rounded.")
    description: str
    humidity: int | None = Field(None, description="Relative humidity (%), rounded.")
    wind_speed: str | None = Field(
        None,
        alias="windSpeed",
        description="Wind speed (mph) with one fractional digit.",
    )
