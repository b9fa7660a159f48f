"""Request bodies accepted by the HTTP API."""
from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from .customer import Customer
from .vehicle import Vehicle, VehicleType


class VehicleCreate(BaseModel):
    make: str
    model: str
    licensePlate: str
    dailyRate: Decimal = Field(ge=0, decimal_places=2)
    vehicleType: VehicleType = VehicleType.CAR

    def to_vehicle(self) -> Vehicle:
        return Vehicle(**self.model_dump())


class CustomerCreate(BaseModel):
    firstName: str
    lastName: str
    email: str
    phone: str

    def to_customer(self) -> Customer:
        return Customer(**self.model_dump())


class RentVehicleRequest(BaseModel):
    vehicleId: int
    customerId: int
    startDate: date
    endDate: date
