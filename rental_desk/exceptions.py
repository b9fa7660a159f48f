"""
Error types raised by the rental manager.

Callers catch these to render a precise message instead of a generic failure:
the HTTP layer turns them into status codes, the demo prints them.
"""


class RentalDeskError(Exception):
    """Base class for every business-rule failure."""

    default_message = "Error: rental operation failed"

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(RentalDeskError):
    """Raised when an identifier does not exist in its collection."""

    kind = "record"

    def __init__(self, identifier: int, message: str = "") -> None:
        self.identifier = identifier
        super().__init__(message or f"Error: {self.kind} {identifier} not found")


class VehicleNotFoundError(NotFoundError):
    kind = "vehicle"


class CustomerNotFoundError(NotFoundError):
    kind = "customer"


class RentalNotFoundError(NotFoundError):
    kind = "rental"


class InvalidStateError(RentalDeskError):
    """Raised when an operation is well formed but breaks a business rule."""

    default_message = "Error: invalid state for this operation"


class VehicleUnavailableError(InvalidStateError):
    """Raised when renting a vehicle that is already out."""

    def __init__(self, vehicle_id: int) -> None:
        self.vehicle_id = vehicle_id
        super().__init__(f"Error: vehicle {vehicle_id} is not available")


class InvalidDateRangeError(RentalDeskError):
    """Raised when a rental ends before it starts."""

    default_message = "Error: invalid date range"
