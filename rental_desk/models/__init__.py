from .customer import Customer
from .rental import Rental, RentalStatus
from .requests import CustomerCreate, RentVehicleRequest, VehicleCreate
from .vehicle import Vehicle, VehicleType

__all__ = [
    "Customer",
    "CustomerCreate",
    "Rental",
    "RentalStatus",
    "RentVehicleRequest",
    "Vehicle",
    "VehicleCreate",
    "VehicleType",
]
