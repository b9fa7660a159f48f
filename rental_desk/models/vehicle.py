from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class VehicleType(str, Enum):
    CAR = "Car"
    TRUCK = "Truck"
    SUV = "SUV"
    MOTORCYCLE = "Motorcycle"
    VAN = "Van"


class Vehicle(BaseModel):
    id: Optional[int] = Field(default=None, frozen=True)
    make: str
    model: str
    licensePlate: str
    dailyRate: Decimal = Field(ge=0, decimal_places=2)
    available: bool = True
    vehicleType: VehicleType = VehicleType.CAR
