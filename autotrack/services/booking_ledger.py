# autotrack/services/booking_ledger.py
"""
Booking Ledger: owns booking records and their status transitions.

How it works:
  - create()   → assigns the next B<n> id, fixes the cost, marks the vehicle booked
  - complete() → active booking becomes completed, vehicle goes back to available
  - overlaps() → inclusive date-range test against the vehicle's active bookings

The caller (rental_service) is responsible for checking vehicle availability
and overlap before calling create().
"""

import itertools
from datetime import date
from decimal import Decimal
from typing import Optional

from autotrack.models.booking import Booking, BookingStatus
from autotrack.models.user import User
from autotrack.models.vehicle import Vehicle, VehicleStatus
from autotrack.services.vehicle_registry import VehicleRegistry
from autotrack.utils.logger import get_logger

logger = get_logger(__name__)


def calculate_cost(vehicle: Vehicle, start_date: date, end_date: date) -> Decimal:
    """Whole days between start and end (end exclusive) × daily rate."""
    days = (end_date - start_date).days
    return days * vehicle.daily_rate


class BookingLedger:
    def __init__(self, registry: VehicleRegistry):
        self._registry = registry
        self._bookings: list[Booking] = []
        # Counts every booking ever created, not the current list length
        self._sequence = itertools.count(1)

    def create(self, vehicle: Vehicle, customer: User, start_date: date, end_date: date) -> Booking:
        booking = Booking(
            id=f"B{next(self._sequence)}",
            vehicle=vehicle,
            customer=customer,
            start_date=start_date,
            end_date=end_date,
            total_cost=calculate_cost(vehicle, start_date, end_date),
            status=BookingStatus.ACTIVE,
        )
        self._bookings.append(booking)
        self._registry.set_status(vehicle.id, VehicleStatus.BOOKED)
        logger.info(f"[BOOKING] {booking.id}: {customer.username} → {vehicle.id} "
                    f"{start_date}..{end_date} cost={booking.total_cost}")
        return booking

    def complete(self, booking_id: str) -> bool:
        booking = self.find_by_id(booking_id)
        if booking is None or not booking.is_active:
            return False
        booking.status = BookingStatus.COMPLETED
        self._registry.set_status(booking.vehicle.id, VehicleStatus.AVAILABLE)
        logger.info(f"[BOOKING] {booking.id} completed, {booking.vehicle.id} returned")
        return True

    def overlaps(self, vehicle_id: str, start_date: date, end_date: date) -> bool:
        return any(
            b.vehicle.id == vehicle_id and b.is_active and b.covers(start_date, end_date)
            for b in self._bookings
        )

    def find_by_id(self, booking_id: str) -> Optional[Booking]:
        return next((b for b in self._bookings if b.id == booking_id), None)

    def for_customer(self, user_id: str) -> list[Booking]:
        return [b for b in self._bookings if b.customer.id == user_id]

    def for_admin(self) -> list[Booking]:
        return list(self._bookings)
