# autotrack/main.py
"""
Console entry point: login, admin and customer menus.
All business rules live in RentalService; this module only prompts, parses
and prints. Run with `python -m autotrack.main` or the `autotrack` script.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import ValidationError

from autotrack.config import settings
from autotrack.models.booking import Booking
from autotrack.models.vehicle import Vehicle, VehicleCategory, VehicleStatus
from autotrack.seed import build_rental_service
from autotrack.services.rental_service import RentalService
from autotrack.services.session import Session
from autotrack.utils.logger import get_logger

logger = get_logger(__name__)


# --- UI Helper Functions ---

def print_header(title: str):
    print("\n" + "=" * 40)
    print(f" {title.center(38)} ")
    print("=" * 40)


def display_vehicles(vehicles: list[Vehicle]):
    if not vehicles:
        print("No vehicles found.")
        return
    print_header("VEHICLES")
    for vehicle in vehicles:
        print(vehicle)


def display_bookings(bookings: list[Booking]):
    if not bookings:
        print("No bookings found.")
        return
    print_header("BOOKINGS")
    for booking in bookings:
        print(booking)


# --- Input Parsing ---
# Each helper raises ValueError on malformed input; menu handlers turn that into a message.

def prompt_date(prompt_text: str) -> date:
    raw = input(prompt_text).strip()
    return datetime.strptime(raw, settings.DATE_FORMAT).date()


def prompt_int(prompt_text: str) -> int:
    return int(input(prompt_text).strip())


def prompt_decimal(prompt_text: str) -> Decimal:
    raw = input(prompt_text).strip()
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"'{raw}' is not a number")


def prompt_enum(prompt_text: str, enum_cls):
    raw = input(prompt_text).strip()
    try:
        return enum_cls[raw.upper()]
    except KeyError:
        raise ValueError(f"'{raw}' is not one of {'/'.join(m.name for m in enum_cls)}")


# --- Menu Handlers ---

def handle_add_vehicle(service: RentalService, session: Session):
    print("\nAdd New Vehicle:")
    vehicle = Vehicle(
        id=input("ID: ").strip(),
        brand=input("Brand: ").strip(),
        model=input("Model: ").strip(),
        category=prompt_enum("Type (CAR/VAN/MOTORCYCLE): ", VehicleCategory),
        capacity=prompt_int("Capacity: "),
        daily_rate=prompt_decimal("Daily Rate: "),
    )
    if service.add_vehicle(session, vehicle):
        print("Vehicle added successfully!")
    else:
        print("Failed to add vehicle. The ID may already exist or you may not have permission.")


def handle_update_vehicle_status(service: RentalService, session: Session):
    print("\nUpdate Vehicle Status:")
    display_vehicles(service.all_vehicles(session))
    vehicle_id = input("Enter vehicle ID: ").strip()
    status = prompt_enum("New status (AVAILABLE/BOOKED/MAINTENANCE): ", VehicleStatus)
    if service.update_vehicle_status(session, vehicle_id, status):
        print("Vehicle status updated!")
    else:
        print("Failed to update status. Vehicle not found or no permission.")


def handle_make_booking(service: RentalService, session: Session):
    print("\nMake a Booking:")
    display_vehicles(service.available_vehicles(session))
    vehicle_id = input("Enter vehicle ID: ").strip()
    start_date = prompt_date("Start date (YYYY-MM-DD): ")
    end_date = prompt_date("End date (YYYY-MM-DD): ")
    booking = service.make_booking(session, vehicle_id, start_date, end_date)
    if booking:
        print(f"Booking successful! {booking}")
    else:
        print("Booking failed. Vehicle may not be available for those dates.")


def handle_return_vehicle(service: RentalService, session: Session):
    print("\nReturn a Vehicle:")
    active = [b for b in service.my_bookings(session) if b.is_active]
    if not active:
        print("You have no active bookings.")
        return
    display_bookings(active)
    booking_id = input("Enter booking ID to return: ").strip()
    if service.return_vehicle(session, booking_id):
        print("Vehicle returned successfully!")
    else:
        print("Failed to return vehicle. Booking not found.")


# --- Menus ---

def show_login_menu(service: RentalService) -> Optional[Session]:
    print("\nPlease login:")
    username = input("Username: ")
    password = input("Password: ")
    session = service.login(username, password)
    if session:
        print(f"Login successful! Welcome, {session.user.name}")
    else:
        print("Invalid credentials. Please try again.")
    return session


def show_admin_menu(service: RentalService, session: Session):
    print_header("ADMIN MENU")
    print("1. View all vehicles")
    print("2. Add new vehicle")
    print("3. Update vehicle status")
    print("4. View all bookings")
    print("5. Logout")
    choice = input("Select an option: ").strip()

    if choice == '1':
        display_vehicles(service.all_vehicles(session))
    elif choice == '2':
        _run_handler(handle_add_vehicle, service, session)
    elif choice == '3':
        _run_handler(handle_update_vehicle_status, service, session)
    elif choice == '4':
        display_bookings(service.all_bookings(session))
    elif choice == '5':
        service.logout(session)
    else:
        print("Invalid option.")


def show_customer_menu(service: RentalService, session: Session):
    print_header("CUSTOMER MENU")
    print("1. View available vehicles")
    print("2. Make a booking")
    print("3. View my bookings")
    print("4. Return a vehicle")
    print("5. Logout")
    choice = input("Select an option: ").strip()

    if choice == '1':
        display_vehicles(service.available_vehicles(session))
    elif choice == '2':
        _run_handler(handle_make_booking, service, session)
    elif choice == '3':
        display_bookings(service.my_bookings(session))
    elif choice == '4':
        _run_handler(handle_return_vehicle, service, session)
    elif choice == '5':
        service.logout(session)
    else:
        print("Invalid option.")


def _run_handler(handler, service: RentalService, session: Session):
    try:
        handler(service, session)
    except ValidationError as e:
        errors = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
        print(f"Invalid input: {errors}")
    except ValueError as e:
        print(f"Invalid input: {e}")


def run(service: RentalService):
    """Menu loop. Returns when input is exhausted."""
    print_header("AutoTrack Rental System")
    session: Optional[Session] = None
    try:
        while True:
            user = service.current_user(session)
            if user is None:
                session = show_login_menu(service)
            elif service.users.is_admin(user):
                show_admin_menu(service, session)
            else:
                show_customer_menu(service, session)
    except EOFError:
        print("\nGoodbye.")


def main():
    logger.info("🚀 AutoTrack starting up...")
    service = build_rental_service(settings)
    try:
        run(service)
    except KeyboardInterrupt:
        print("\n\nApplication shutting down.")
    logger.info("🛑 AutoTrack shut down")


if __name__ == "__main__":
    main()
