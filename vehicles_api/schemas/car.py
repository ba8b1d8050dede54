from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from vehicles_api.core.enums import Condition


class Details(BaseModel):
    body: Optional[str] = None
    model: str = Field(..., min_length=1)
    manufacturer: str = Field(..., min_length=1)
    number_of_doors: Optional[int] = Field(None, ge=1)
    fuel_type: Optional[str] = None
    engine: Optional[str] = None
    mileage: Optional[int] = Field(None, ge=0)
    model_year: Optional[int] = None
    production_year: Optional[int] = None
    external_color: Optional[str] = None


class Address(BaseModel):
    address: str
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


class Location(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    # resolved by the maps service on single reads, never stored
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


class CarIn(BaseModel):
    id: Optional[int] = None
    condition: Condition
    details: Details
    location: Location
    # ignored when saving
    price: Optional[str] = None


class CarOut(BaseModel):
    id: int
    condition: Condition
    details: Details
    location: Location
    price: Optional[str] = None
    created_at: datetime
    modified_at: Optional[datetime] = None


class CarList(BaseModel):
    cars: List[CarOut]
