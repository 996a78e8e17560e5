from __future__ import annotations

import httpx
import structlog

from app.core.config import Settings
from app.core.exceptions import CityNotFound, DataUnavailable, InternalLookupFailure, WeatherError
from app.schemas.weather import RawObservation, WeatherRecord
from app.services.history import HistoryStore
from app.services.weather.geocoding import geocode_city
from app.services.weather.nws import fetch_latest_observation, resolve_station
from app.services.weather.units import celsius_to_fahrenheit, mps_to_mph, round_half_up


DESCRIPTION_PLACEHOLDER = "n/a"

logger = structlog.get_logger()


def city_label(display_name: str, fallback: str) -> str:
    label = display_name.split(",", 1)[0].strip()
    return label or fallback.strip()


def build_record(city: str, observation: RawObservation) -> WeatherRecord:
    """Convert a raw observation into display units.

    Temperature is mandatory; humidity, wind and description are optional.
    """
    if observation.temperature_c is None:
        raise DataUnavailable()

    humidity = (
        round_half_up(observation.humidity_pct)
        if observation.humidity_pct is not None
        else None
    )
    wind_speed = (
        f"{mps_to_mph(observation.wind_speed_mps):.1f}"
        if observation.wind_speed_mps is not None
        else None
    )
    return WeatherRecord(
        city=city,
        temperature=round_half_up(celsius_to_fahrenheit(observation.temperature_c)),
        description=(observation.description or DESCRIPTION_PLACEHOLDER).lower(),
        humidity=humidity,
        wind_speed=wind_speed,
    )


async def _observe(
    city: str,
    *,
    client: httpx.AsyncClient,
    settings: Settings,
) -> tuple[str, RawObservation]:
    location = await geocode_city(city, client=client, settings=settings)
    if location is None:
        raise CityNotFound()

    label = city_label(location.display_name, city)
    station_id = await resolve_station(
        lat=location.latitude,
        lon=location.longitude,
        client=client,
        settings=settings,
    )
    observation = await fetch_latest_observation(station_id, client=client, settings=settings)
    logger.debug("observation_fetched", city=label, station=station_id)
    return label, observation


async def lookup_weather(
    city: str,
    *,
    client: httpx.AsyncClient,
    settings: Settings,
    store: HistoryStore,
) -> WeatherRecord:
    """Geocode ``city``, read its nearest station and record the lookup.

    Every step runs in order and the first failure ends the lookup. Nothing
    is written to history unless a complete record was built.
    """
    try:
        label, observation = await _observe(city, client=client, settings=settings)
    except WeatherError:
        raise
    except Exception as exc:
        logger.exception("lookup_failed", city=city)
        raise InternalLookupFailure() from exc

    record = build_record(label, observation)
    await store.append(city=record.city, temperature=record.temperature)
    logger.info("lookup_succeeded", city=record.city, temperature=record.temperature)
    return record
