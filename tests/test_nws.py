import httpx
import pytest
import respx

from app.core.exceptions import ObservationFetchFailure, StationLookupFailure, StationNotFound
from app.services.weather.nws import fetch_latest_observation, resolve_station
from upstream import OBSERVATION_URL, POINT, POINTS_URL, STATIONS, STATIONS_URL, observation


@pytest.mark.asyncio
async def test_resolve_station_takes_first_station(http_client, settings):
    with respx.mock:
        respx.get(POINTS_URL).respond(200, json=POINT)
        respx.get(STATIONS_URL).respond(200, json=STATIONS)

        station = await resolve_station(lat=41.8781, lon=-87.6298, client=http_client, settings=settings)

    assert station == "KMDW"


@pytest.mark.asyncio
async def test_resolve_station_points_error(http_client, settings):
    with respx.mock:
        respx.get(POINTS_URL).respond(404, json={"title": "Data Unavailable For Requested Point"})

        with pytest.raises(StationLookupFailure):
            await resolve_station(lat=41.8781, lon=-87.6298, client=http_client, settings=settings)


@pytest.mark.asyncio
async def test_resolve_station_points_timeout(http_client, settings):
    with respx.mock:
        respx.get(POINTS_URL).mock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(StationLookupFailure):
            await resolve_station(lat=41.8781, lon=-87.6298, client=http_client, settings=settings)


@pytest.mark.asyncio
async def test_resolve_station_empty_feed(http_client, settings):
    with respx.mock:
        respx.get(POINTS_URL).respond(200, json=POINT)
        respx.get(STATIONS_URL).respond(200, json={"features": []})

        with pytest.raises(StationNotFound):
            await resolve_station(lat=41.8781, lon=-87.6298, client=http_client, settings=settings)


@pytest.mark.asyncio
async def test_resolve_station_feed_error(http_client, settings):
    with respx.mock:
        respx.get(POINTS_URL).respond(200, json=POINT)
        respx.get(STATIONS_URL).respond(503)

        with pytest.raises(StationLookupFailure):
            await resolve_station(lat=41.8781, lon=-87.6298, client=http_client, settings=settings)


@pytest.mark.asyncio
async def test_fetch_latest_observation_extracts_fields(http_client, settings):
    with respx.mock:
        route = respx.get(OBSERVATION_URL).respond(200, json=observation())

        obs = await fetch_latest_observation("KMDW", client=http_client, settings=settings)

    assert obs.temperature_c == 20.0
    assert obs.humidity_pct == 55.0
    assert obs.wind_speed_mps == 4.0
    assert obs.description == "Clear"
    assert route.calls.last.request.headers["User-Agent"] == settings.user_agent


@pytest.mark.asyncio
async def test_fetch_latest_observation_missing_values(http_client, settings):
    with respx.mock:
        respx.get(OBSERVATION_URL).respond(
            200,
            json=observation(temperature=None, humidity=None, wind=None, description=""),
        )

        obs = await fetch_latest_observation("KMDW", client=http_client, settings=settings)

    assert obs.temperature_c is None
    assert obs.humidity_pct is None
    assert obs.wind_speed_mps is None
    assert obs.description is None


@pytest.mark.asyncio
async def test_fetch_latest_observation_upstream_error(http_client, settings):
    with respx.mock:
        respx.get(OBSERVATION_URL).respond(500)

        with pytest.raises(ObservationFetchFailure):
            await fetch_latest_observation("KMDW", client=http_client, settings=settings)


@pytest.mark.asyncio
async def test_fetch_latest_observation_converts_kmh_wind(http_client, settings):
    with respx.mock:
        respx.get(OBSERVATION_URL).respond(
            200,
            json=observation(wind=36.0, wind_unit="wmoUnit:km_h-1"),
        )

        obs = await fetch_latest_observation("KMDW", client=http_client, settings=settings)

    assert obs.wind_speed_mps == pytest.approx(10.0)
