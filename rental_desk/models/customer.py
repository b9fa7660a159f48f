from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Customer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    firstName: str
    lastName: str
    email: str
    phone: str

    @property
    def fullName(self) -> str:
        return f"{self.firstName} {self.lastName}"
