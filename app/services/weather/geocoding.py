from __future__ import annotations

import httpx
import structlog
from pydantic import ValidationError

from app.core.config import Settings
from app.core.http import get_json
from app.schemas.weather import Location


logger = structlog.get_logger()


async def geocode_city(
    city: str,
    *,
    client: httpx.AsyncClient,
    settings: Settings,
) -> Location | None:
    """Resolve a free-text city to coordinates using the Nominatim search API.

    Returns ``None`` when there is no match. Transport errors, non-2xx
    responses and malformed bodies are reported the same way: the caller
    only ever sees "not found".
    """
    params = {
        "q": f"{city}, {settings.geocoding_country}",
        "format": "json",
        "limit": 1,
    }
    try:
        data = await get_json(client, settings.geocoding_url, params=params)
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("geocoding_failed", city=city, error=type(exc).__name__)
        return None

    if not isinstance(data, list) or not data:
        logger.info("geocoding_no_match", city=city)
        return None

    first = data[0]
    try:
        return Location(
            latitude=float(first["lat"]),
            longitude=float(first["lon"]),
            display_name=first["display_name"],
        )
    except (KeyError, TypeError, ValueError, ValidationError) as exc:
        logger.warning("geocoding_malformed", city=city, error=type(exc).__name__)
        return None
