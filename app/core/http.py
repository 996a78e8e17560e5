from __future__ import annotations

import httpx

from app.core.config import Settings


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    limits = httpx.Limits(max_keepalive_connections=20, max_connections=50)
    timeout = httpx.Timeout(settings.http_timeout_seconds)
    return httpx.AsyncClient(
        timeout=timeout,
        limits=limits,
        headers={
            # api.weather.gov rejects requests without an identifying User-Agent.
            "User-Agent": settings.user_agent,
            "Accept": "application/geo+json, application/json",
        },
        follow_redirects=True,
    )


async def get_json(client: httpx.AsyncClient, url: str, **kwargs) -> dict | list:
    """GET ``url`` and decode the JSON body, raising on transport errors and non-2xx."""
    resp = await client.get(url, **kwargs)
    resp.raise_for_status()
    return resp.json()
