# autotrack/seed.py
"""
Builds a RentalService and loads the demo fleet and accounts.
Set SEED_SAMPLE_DATA=false in .env to start with empty stores.
"""

from decimal import Decimal
from typing import Optional

from autotrack.config import Settings, settings as default_settings
from autotrack.models.user import User, UserRole
from autotrack.models.vehicle import Vehicle, VehicleCategory
from autotrack.services.rental_service import RentalService
from autotrack.utils.logger import get_logger

logger = get_logger(__name__)

SAMPLE_VEHICLES = [
    {"id": "V001", "brand": "Toyota", "model": "Corolla", "category": VehicleCategory.CAR, "capacity": 5, "daily_rate": Decimal("50.00")},
    {"id": "V002", "brand": "Honda", "model": "CR-V", "category": VehicleCategory.CAR, "capacity": 5, "daily_rate": Decimal("70.00")},
    {"id": "V003", "brand": "Ford", "model": "Transit", "category": VehicleCategory.VAN, "capacity": 12, "daily_rate": Decimal("100.00")},
    {"id": "V004", "brand": "Harley-Davidson", "model": "Sportster", "category": VehicleCategory.MOTORCYCLE, "capacity": 2, "daily_rate": Decimal("60.00")},
]

SAMPLE_USERS = [
    {"id": "ADM001", "username": "admin", "password": "admin123", "name": "System Admin", "role": UserRole.ADMIN},
    {"id": "CUS001", "username": "john", "password": "john123", "name": "John Doe", "role": UserRole.CUSTOMER},
    {"id": "CUS002", "username": "jane", "password": "jane123", "name": "Jane Smith", "role": UserRole.CUSTOMER},
]


def load_sample_data(service: RentalService):
    """Seed vehicles go straight into the registry; no admin session is involved."""
    for data in SAMPLE_VEHICLES:
        service.vehicles.add(Vehicle(**data))
    for data in SAMPLE_USERS:
        service.users.add(User(**data))
    logger.info(f"Sample data loaded: {len(service.vehicles.all())} vehicles, {len(service.users.all())} users")


def build_rental_service(settings: Optional[Settings] = None) -> RentalService:
    settings = settings or default_settings
    service = RentalService()
    if settings.SEED_SAMPLE_DATA:
        load_sample_data(service)
    return service
