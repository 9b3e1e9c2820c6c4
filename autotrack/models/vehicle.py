# autotrack/models/vehicle.py
"""
Fleet records.
Status is the only mutable field; it is validated on every assignment.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

from autotrack.config import settings


class VehicleCategory(str, Enum):
    CAR = "car"
    VAN = "van"
    MOTORCYCLE = "motorcycle"


class VehicleStatus(str, Enum):
    AVAILABLE = "available"
    BOOKED = "booked"
    MAINTENANCE = "maintenance"


class Vehicle(BaseModel):
    id: str = Field(min_length=1)
    brand: str
    model: str
    category: VehicleCategory
    capacity: int = Field(gt=0)                  # passenger seats
    daily_rate: Decimal = Field(ge=0)
    status: VehicleStatus = VehicleStatus.AVAILABLE

    class Config:
        validate_assignment = True

    def is_available(self) -> bool:
        return self.status == VehicleStatus.AVAILABLE

    def __str__(self):
        return (f"{self.id}: {self.brand} {self.model} ({self.category.name}, {self.capacity} seats) - "
                f"{settings.CURRENCY_SYMBOL}{self.daily_rate:.2f}/day - Status: {self.status.name}")
