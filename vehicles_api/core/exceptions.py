"""Domain errors raised by the car service layer."""
from typing import Optional


class NotFoundError(Exception):
    """Requested resource does not exist in the store."""

    resource_name = "Resource"

    def __init__(self, resource_id: Optional[int] = None):
        self.resource_id = resource_id
        if resource_id is not None:
            message = f"{self.resource_name} with id {resource_id} not found"
        else:
            message = f"{self.resource_name} not found"
        super().__init__(message)


class CarNotFoundError(NotFoundError):
    resource_name = "Car"
