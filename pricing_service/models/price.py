from sqlalchemy import Column, String, Integer, Numeric
from pricing_service.models.base import BaseModel


class Price(BaseModel):
    __tablename__ = "prices"

    vehicle_id = Column(Integer, unique=True, nullable=False, index=True)
    currency = Column(String(3), nullable=False, default="USD")
    price = Column(Numeric(12, 2), nullable=False)
