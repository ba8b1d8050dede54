from typing import Optional
from vehicles_api.models.car import Car
from vehicles_api.schemas.car import CarOut, Details, Location


def build_details(car: Car) -> Details:
    return Details(
        body=car.body,
        model=car.model,
        manufacturer=car.manufacturer,
        number_of_doors=car.number_of_doors,
        fuel_type=car.fuel_type,
        engine=car.engine,
        mileage=car.mileage,
        model_year=car.model_year,
        production_year=car.production_year,
        external_color=car.external_color,
    )


def build_location(car: Car) -> Location:
    return Location(lat=car.lat, lon=car.lon)


def build_car_response(
    car: Car,
    price: Optional[str] = None,
    location: Optional[Location] = None,
) -> CarOut:
    """Map a stored car to its API shape, attaching enrichment data if given."""
    return CarOut(
        id=car.id,
        condition=car.condition,
        details=build_details(car),
        location=location if location is not None else build_location(car),
        price=price,
        created_at=car.created_at,
        modified_at=car.modified_at,
    )


def build_car_response_list(cars: list) -> list:
    return [build_car_response(car) for car in cars]
