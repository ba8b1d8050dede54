from decimal import Decimal
from pydantic import BaseModel, ConfigDict


class PriceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    currency: str
    price: Decimal
    vehicle_id: int
