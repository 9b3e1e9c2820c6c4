# autotrack/services/vehicle_registry.py
"""
Vehicle Registry: in-memory fleet store.
Used by the booking ledger (status side effects) and the rental service.
"""

from typing import Optional

from autotrack.models.vehicle import Vehicle, VehicleStatus
from autotrack.utils.logger import get_logger

logger = get_logger(__name__)


class VehicleRegistry:
    def __init__(self):
        self._vehicles: list[Vehicle] = []

    def add(self, vehicle: Vehicle) -> bool:
        """Insert a vehicle as available. Returns False if the id is already taken."""
        if self.find_by_id(vehicle.id) is not None:
            logger.info(f"[FLEET] Duplicate vehicle id {vehicle.id} — not added")
            return False
        vehicle.status = VehicleStatus.AVAILABLE
        self._vehicles.append(vehicle)
        logger.info(f"[FLEET] Added {vehicle.id} ({vehicle.brand} {vehicle.model})")
        return True

    def set_status(self, vehicle_id: str, status: VehicleStatus) -> bool:
        # Any transition is allowed, e.g. booked -> maintenance
        vehicle = self.find_by_id(vehicle_id)
        if vehicle is None:
            return False
        previous = vehicle.status
        vehicle.status = status
        logger.info(f"[FLEET] {vehicle_id}: {previous.value} → {status.value}")
        return True

    def find_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        return next((v for v in self._vehicles if v.id == vehicle_id), None)

    def find_available(self) -> list[Vehicle]:
        return [v for v in self._vehicles if v.status == VehicleStatus.AVAILABLE]

    def all(self) -> list[Vehicle]:
        return list(self._vehicles)
