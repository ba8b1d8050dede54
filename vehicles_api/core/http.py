import logging
from typing import Optional
import httpx
from vehicles_api.core.config import settings

logger = logging.getLogger(__name__)

pricing_http: Optional[httpx.AsyncClient] = None
maps_http: Optional[httpx.AsyncClient] = None

async def init_http_clients():
    global pricing_http, maps_http
    pricing_http = httpx.AsyncClient(
        base_url=settings.PRICING_ENDPOINT, timeout=settings.UPSTREAM_TIMEOUT
    )
    maps_http = httpx.AsyncClient(
        base_url=settings.MAPS_ENDPOINT, timeout=settings.UPSTREAM_TIMEOUT
    )
    logger.info(
        f"Upstream clients ready (pricing={settings.PRICING_ENDPOINT}, maps={settings.MAPS_ENDPOINT})"
    )

async def close_http_clients():
    global pricing_http, maps_http
    if pricing_http:
        await pricing_http.aclose()
        pricing_http = None
    if maps_http:
        await maps_http.aclose()
        maps_http = None

def get_pricing_http() -> httpx.AsyncClient:
    if pricing_http is None:
        raise RuntimeError("HTTP clients not initialized. Call init_http_clients() first.")
    return pricing_http

def get_maps_http() -> httpx.AsyncClient:
    if maps_http is None:
        raise RuntimeError("HTTP clients not initialized. Call init_http_clients() first.")
    return maps_http
