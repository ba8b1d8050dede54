import logging
from fastapi import APIRouter, Query

from maps_service.schemas.address import Address
from maps_service.services.addresses import resolve_address
from maps_service.core.metrics import addresses_resolved

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/maps", tags=["maps"])


@router.get("", response_model=Address)
async def get_address(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180)
):
    address = resolve_address(lat, lon)
    addresses_resolved.inc()
    logger.debug(f"Resolved ({lat}, {lon}) to {address.address}")
    return address
