class NotFoundError(Exception):
    """Requested resource does not exist in the store."""


class PriceNotFoundError(NotFoundError):

    def __init__(self, vehicle_id: int):
        self.vehicle_id = vehicle_id
        super().__init__(f"Price for vehicle {vehicle_id} not found")
