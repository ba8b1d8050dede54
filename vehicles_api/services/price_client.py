import httpx
import logging
from vehicles_api.core.enums import UpstreamService
from vehicles_api.core.metrics import track_upstream_call

logger = logging.getLogger(__name__)

PRICE_UNAVAILABLE = "(consult price)"


class PriceClient:
    """Looks up the current quote for a vehicle from the pricing service."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    @track_upstream_call(str(UpstreamService.PRICING))
    async def _fetch_price(self, vehicle_id: int) -> dict:
        response = await self.client.get("/services/price", params={"vehicleId": vehicle_id})
        response.raise_for_status()
        return response.json()

    async def get_price(self, vehicle_id: int) -> str:
        """Return the price as "<currency> <amount>", or a placeholder on failure.

        Failures are not raised: a missing quote or an unreachable pricing
        service degrades the price field only.
        """
        try:
            data = await self._fetch_price(vehicle_id)
            return f"{data['currency']} {data['price']}"
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Pricing service returned {e.response.status_code} for vehicle {vehicle_id}"
            )
        except httpx.HTTPError as e:
            logger.warning(f"Pricing service unreachable for vehicle {vehicle_id}: {e}")
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Malformed price payload for vehicle {vehicle_id}: {e}")
        return PRICE_UNAVAILABLE
