from fastapi import APIRouter, Depends, Response

from vehicles_api.schemas.car import CarIn, CarOut, CarList
from vehicles_api.services.cars import CarService, get_car_service
from vehicles_api.core.response_builders import build_car_response, build_car_response_list

router = APIRouter(prefix="/cars", tags=["cars"])


@router.get("", response_model=CarList)
async def list_cars(service: CarService = Depends(get_car_service)):
    cars = await service.list()
    return CarList(cars=build_car_response_list(cars))


@router.get("/{car_id}", response_model=CarOut)
async def get_car(car_id: int, service: CarService = Depends(get_car_service)):
    return await service.find_by_id(car_id)


@router.post("", response_model=CarOut, status_code=201)
async def create_car(payload: CarIn, service: CarService = Depends(get_car_service)):
    car = await service.save(payload.model_copy(update={"id": None}))
    return build_car_response(car)


@router.put("/{car_id}", response_model=CarOut)
async def update_car(
    car_id: int,
    payload: CarIn,
    service: CarService = Depends(get_car_service)
):
    """Update details, location and condition; price and address are ignored"""
    car = await service.save(payload.model_copy(update={"id": car_id}))
    return build_car_response(car)


@router.delete("/{car_id}", status_code=204)
async def delete_car(car_id: int, service: CarService = Depends(get_car_service)):
    await service.delete(car_id)
    return Response(status_code=204)
