"""Client for the National Weather Service API (api.weather.gov)."""

from __future__ import annotations

import httpx
import structlog

from app.core.config import Settings
from app.core.exceptions import ObservationFetchFailure, StationLookupFailure, StationNotFound
from app.core.http import get_json
from app.schemas.weather import RawObservation


logger = structlog.get_logger()


def _value(props: dict, field: str) -> float | None:
    # Measurements are quantitative values: {"unitCode": ..., "value": ...}
    measurement = props.get(field)
    if not isinstance(measurement, dict):
        return None
    value = measurement.get("value")
    return float(value) if value is not None else None


def _wind_speed_mps(props: dict) -> float | None:
    speed = _value(props, "windSpeed")
    if speed is None:
        return None
    # api.weather.gov reports wind in km/h on most stations.
    unit = (props.get("windSpeed") or {}).get("unitCode", "")
    if unit.endswith("km_h-1"):
        return speed / 3.6
    return speed


async def resolve_station(
    *,
    lat: float,
    lon: float,
    client: httpx.AsyncClient,
    settings: Settings,
) -> str:
    """Return the identifier of the nearest observation station for a point."""
    # The points endpoint only accepts up to four decimal places.
    points_url = f"{settings.weather_api_url}/points/{lat:.4f},{lon:.4f}"
    try:
        point = await get_json(client, points_url)
        stations_url = point["properties"]["observationStations"]
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
        logger.warning("points_lookup_failed", lat=lat, lon=lon, error=type(exc).__name__)
        raise StationLookupFailure() from exc

    try:
        feed = await get_json(client, stations_url)
        features = feed.get("features") or []
    except (httpx.HTTPError, ValueError, AttributeError) as exc:
        logger.warning("stations_feed_failed", url=stations_url, error=type(exc).__name__)
        raise StationLookupFailure() from exc

    if not features:
        raise StationNotFound()

    try:
        return features[0]["properties"]["stationIdentifier"]
    except (KeyError, TypeError) as exc:
        raise StationLookupFailure() from exc


async def fetch_latest_observation(
    station_id: str,
    *,
    client: httpx.AsyncClient,
    settings: Settings,
) -> RawObservation:
    url = f"{settings.weather_api_url}/stations/{station_id}/observations/latest"
    try:
        data = await get_json(client, url)
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("observation_fetch_failed", station=station_id, error=type(exc).__name__)
        raise ObservationFetchFailure() from exc

    props = (data.get("properties") if isinstance(data, dict) else None) or {}
    return RawObservation(
        temperature_c=_value(props, "temperature"),
        humidity_pct=_value(props, "relativeHumidity"),
        wind_speed_mps=_wind_speed_mps(props),
        description=props.get("textDescription") or None,
    )
