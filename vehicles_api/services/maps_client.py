import httpx
import logging
from vehicles_api.core.enums import UpstreamService
from vehicles_api.core.metrics import track_upstream_call
from vehicles_api.schemas.car import Address, Location

logger = logging.getLogger(__name__)


class MapsClient:
    """Resolves coordinates to a street address through the maps service."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    @track_upstream_call(str(UpstreamService.MAPS))
    async def _fetch_address(self, lat: float, lon: float) -> dict:
        response = await self.client.get("/maps", params={"lat": lat, "lon": lon})
        response.raise_for_status()
        return response.json()

    async def get_address(self, location: Location) -> Location:
        """Return a copy of location with the address fields filled in.

        On any failure the copy carries no address; the stored coordinates
        are always preserved.
        """
        unresolved = location.model_copy(
            update={"address": None, "city": None, "state": None, "zip": None}
        )
        try:
            data = await self._fetch_address(location.lat, location.lon)
            address = Address.model_validate(data)
        except httpx.HTTPError as e:
            logger.warning(f"Maps service failed for ({location.lat}, {location.lon}): {e}")
            return unresolved
        except ValueError as e:
            logger.warning(f"Malformed address payload for ({location.lat}, {location.lon}): {e}")
            return unresolved

        return unresolved.model_copy(update=address.model_dump())
