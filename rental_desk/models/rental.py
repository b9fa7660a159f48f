from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class RentalStatus(str, Enum):
    ACTIVE = "Active"
    RETURNED = "Returned"


class Rental(BaseModel):
    id: int = Field(frozen=True)
    vehicleId: int = Field(frozen=True)
    customerId: int = Field(frozen=True)
    startDate: date
    endDate: date
    totalCost: Decimal = Field(ge=0, frozen=True)
    status: RentalStatus = RentalStatus.ACTIVE
    returnedAt: Optional[datetime] = None

    @property
    def isActive(self) -> bool:
        return self.status == RentalStatus.ACTIVE
