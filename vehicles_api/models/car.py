from sqlalchemy import Column, String, Integer, Float, Enum
from vehicles_api.models.base import BaseModel
from vehicles_api.core.enums import Condition


class Car(BaseModel):
    """Persisted car row. Price and resolved address are never stored."""
    __tablename__ = "cars"

    condition = Column(Enum(Condition), nullable=False)

    body = Column(String(40))
    model = Column(String(80), nullable=False)
    manufacturer = Column(String(80), nullable=False)
    number_of_doors = Column(Integer)
    fuel_type = Column(String(40))
    engine = Column(String(80))
    mileage = Column(Integer)
    model_year = Column(Integer)
    production_year = Column(Integer)
    external_color = Column(String(40))

    lat = Column(Float, nullable=False)
    lon = Column(Float, nullable=False)
