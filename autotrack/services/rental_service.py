# autotrack/services/rental_service.py
"""
Rental Service: the public operation set used by the console shell.

Every operation takes the caller's Session first and reports failure through
its return value (False / None / empty list). Nothing here raises for
authorization, not-found, conflict or bad-credential cases; the reason is
logged instead.

Known gap, kept on purpose: return_vehicle() accepts any logged-in session and
does not check that the booking belongs to the caller.
"""

import functools
from datetime import date
from typing import Callable, Optional

from autotrack.models.booking import Booking
from autotrack.models.user import User, UserRole
from autotrack.models.vehicle import Vehicle, VehicleStatus
from autotrack.services.booking_ledger import BookingLedger
from autotrack.services.session import Session
from autotrack.services.user_directory import UserDirectory
from autotrack.services.vehicle_registry import VehicleRegistry
from autotrack.utils.logger import get_logger

logger = get_logger(__name__)


# --- Authorization Decorator ---
def requires_role(*allowed_roles: UserRole, denied: Callable = lambda: False):
    """
    Enforce role-based access on a RentalService method.
    With no roles listed, any logged-in session passes.
    On refusal the wrapped method is not called and denied() is returned.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, session: Optional[Session], *args, **kwargs):
            role = session.role if session else None
            if role is None or (allowed_roles and role not in allowed_roles):
                who = session.username if session and session.username else "anonymous"
                logger.warning(f"[AUTH] {func.__name__} denied for {who} (role={role.value if role else None})")
                return denied()
            return func(self, session, *args, **kwargs)
        return wrapper
    return decorator


class RentalService:
    def __init__(self, vehicles: Optional[VehicleRegistry] = None,
                 users: Optional[UserDirectory] = None,
                 bookings: Optional[BookingLedger] = None):
        self.vehicles = vehicles or VehicleRegistry()
        self.users = users or UserDirectory()
        self.bookings = bookings or BookingLedger(self.vehicles)

    # ── Authentication ────────────────────────────────────────────────────
    def login(self, username: str, password: str) -> Optional[Session]:
        user = self.users.find_by_credentials(username, password)
        if user is None:
            logger.info(f"[AUTH] Failed login for '{username}'")
            return None
        logger.info(f"[AUTH] {user.username} logged in ({user.role.value})")
        return Session(user=user)

    def logout(self, session: Optional[Session]):
        if session is None:
            return
        if session.is_authenticated:
            logger.info(f"[AUTH] {session.username} logged out")
        session.clear()

    @staticmethod
    def current_user(session: Optional[Session]) -> Optional[User]:
        return session.user if session else None

    # ── Fleet management ──────────────────────────────────────────────────
    @requires_role(UserRole.ADMIN)
    def add_vehicle(self, session: Session, vehicle: Vehicle) -> bool:
        return self.vehicles.add(vehicle)

    @requires_role(UserRole.ADMIN)
    def update_vehicle_status(self, session: Session, vehicle_id: str, status: VehicleStatus) -> bool:
        if not self.vehicles.set_status(vehicle_id, status):
            logger.info(f"[FLEET] Status update for unknown vehicle {vehicle_id}")
            return False
        return True

    # ── Bookings ──────────────────────────────────────────────────────────
    @requires_role(UserRole.CUSTOMER, denied=lambda: None)
    def make_booking(self, session: Session, vehicle_id: str,
                     start_date: date, end_date: date) -> Optional[Booking]:
        vehicle = self.vehicles.find_by_id(vehicle_id)
        if vehicle is None:
            logger.info(f"[BOOKING] Unknown vehicle {vehicle_id}")
            return None
        if not vehicle.is_available():
            logger.info(f"[BOOKING] {vehicle_id} is {vehicle.status.value}, not available")
            return None
        if end_date < start_date:
            logger.info(f"[BOOKING] End {end_date} precedes start {start_date} — rejected")
            return None
        if self.bookings.overlaps(vehicle_id, start_date, end_date):
            logger.info(f"[BOOKING] {vehicle_id} already booked within {start_date}..{end_date}")
            return None
        return self.bookings.create(vehicle, session.user, start_date, end_date)

    @requires_role()
    def return_vehicle(self, session: Session, booking_id: str) -> bool:
        if not self.bookings.complete(booking_id):
            logger.info(f"[BOOKING] Return failed: {booking_id} not found or not active")
            return False
        return True

    # ── Queries ───────────────────────────────────────────────────────────
    def available_vehicles(self, session: Optional[Session] = None) -> list[Vehicle]:
        return self.vehicles.find_available()

    @requires_role(UserRole.ADMIN, denied=list)
    def all_vehicles(self, session: Session) -> list[Vehicle]:
        return self.vehicles.all()

    @requires_role(denied=list)
    def my_bookings(self, session: Session) -> list[Booking]:
        return self.bookings.for_customer(session.user.id)

    @requires_role(UserRole.ADMIN, denied=list)
    def all_bookings(self, session: Session) -> list[Booking]:
        return self.bookings.for_admin()
