# autotrack/models/booking.py
"""
Booking records.
total_cost is computed once by the ledger at creation and never recomputed,
even if the vehicle's daily rate changes later.
"""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel

from autotrack.config import settings
from autotrack.models.user import User
from autotrack.models.vehicle import Vehicle


class BookingStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"      # defined, but nothing transitions here yet


class Booking(BaseModel):
    id: str
    vehicle: Vehicle
    customer: User
    start_date: date
    end_date: date              # inclusive
    total_cost: Decimal
    status: BookingStatus = BookingStatus.ACTIVE

    class Config:
        validate_assignment = True

    @property
    def is_active(self) -> bool:
        return self.status == BookingStatus.ACTIVE

    def covers(self, start: date, end: date) -> bool:
        """True if [start, end] shares at least one calendar day with this booking."""
        return not (end < self.start_date or start > self.end_date)

    def __str__(self):
        fmt = settings.DATE_FORMAT
        return (f"Booking {self.id}: {self.customer.name} rented {self.vehicle.model} "
                f"from {self.start_date.strftime(fmt)} to {self.end_date.strftime(fmt)} - "
                f"Total: {settings.CURRENCY_SYMBOL}{self.total_cost:.2f} - Status: {self.status.name}")
