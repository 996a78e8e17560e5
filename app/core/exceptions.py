"""Failure kinds raised by the weather lookup pipeline and the history store."""

from __future__ import annotations


class WeatherError(Exception):
    """Base exception for all lookup and history failures.

    Each subclass carries the HTTP status it maps to and a message that is
    safe to show to the browser client.
    """

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InputMissing(WeatherError):
    status_code = 400
    message = "City name is required"


class CityNotFound(WeatherError):
    status_code = 404
    message = "City not found"


class StationLookupFailure(WeatherError):
    status_code = 500
    message = "Failed to resolve observation station"


class StationNotFound(WeatherError):
    status_code = 404
    message = "No observation station found"


class ObservationFetchFailure(WeatherError):
    status_code = 500
    message = "Failed to fetch latest observation"


class DataUnavailable(WeatherError):
    """The latest observation has no temperature reading."""

    status_code = 503
    message = "Temperature data unavailable"


class StoreUnavailable(WeatherError):
    status_code = 500
    message = "Failed to access search history"


class InternalLookupFailure(WeatherError):
    status_code = 500
    message = "Failed to fetch weather data"
