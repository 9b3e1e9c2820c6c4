# tests/test_main.py
"""Console shell tests: scripted input, assertions on printed output and service state."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from autotrack import main as shell
from autotrack.config import Settings
from autotrack.models import BookingStatus, VehicleCategory, VehicleStatus
from autotrack.seed import build_rental_service


def feed(monkeypatch, *lines):
    """Replay lines through input(); EOFError once they run out ends the menu loop."""
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def service():
    return build_rental_service(Settings(SEED_SAMPLE_DATA=True))


class TestShell:
    def test_bad_login_then_good_login(self, monkeypatch, capsys, service):
        feed(monkeypatch, "john", "nope", "john", "john123")
        shell.run(service)
        out = capsys.readouterr().out
        assert "Invalid credentials. Please try again." in out
        assert "Login successful! Welcome, John Doe" in out

    def test_customer_books_and_returns(self, monkeypatch, capsys, service):
        feed(monkeypatch,
             "john", "john123",
             "2", "V001", "2024-01-01", "2024-01-05",
             "4", "B1",
             "5")
        shell.run(service)
        out = capsys.readouterr().out
        assert "Booking successful!" in out
        assert "Vehicle returned successfully!" in out
        booking = service.bookings.find_by_id("B1")
        assert booking.status == BookingStatus.COMPLETED
        assert booking.total_cost == 200

    def test_malformed_date_returns_to_menu(self, monkeypatch, capsys, service):
        feed(monkeypatch, "john", "john123", "2", "V001", "01/01/2024", "3")
        shell.run(service)
        out = capsys.readouterr().out
        assert "Invalid input" in out
        assert "No bookings found." in out
        assert service.bookings.for_admin() == []

    def test_admin_adds_vehicle_and_updates_status(self, monkeypatch, capsys, service):
        feed(monkeypatch,
             "admin", "admin123",
             "2", "V005", "Tesla", "Model 3", "car", "5", "90",
             "3", "V002", "maintenance",
             "1")
        shell.run(service)
        out = capsys.readouterr().out
        assert "Vehicle added successfully!" in out
        assert "Vehicle status updated!" in out
        assert "V005: Tesla Model 3 (CAR, 5 seats) - $90.00/day - Status: AVAILABLE" in out
        assert service.vehicles.find_by_id("V005").category == VehicleCategory.CAR
        assert service.vehicles.find_by_id("V002").status == VehicleStatus.MAINTENANCE

    def test_admin_invalid_vehicle_fields(self, monkeypatch, capsys, service):
        feed(monkeypatch,
             "admin", "admin123",
             "2", "V005", "Tesla", "Model 3", "truck",
             "2", "V006", "Fiat", "Ducato", "VAN", "0", "40")
        shell.run(service)
        out = capsys.readouterr().out
        assert "'truck' is not one of CAR/VAN/MOTORCYCLE" in out
        assert "capacity" in out
        assert service.vehicles.find_by_id("V005") is None
        assert service.vehicles.find_by_id("V006") is None

    def test_return_with_no_active_bookings(self, monkeypatch, capsys, service):
        feed(monkeypatch, "jane", "jane123", "4")
        shell.run(service)
        assert "You have no active bookings." in capsys.readouterr().out

    def test_logout_goes_back_to_login(self, monkeypatch, capsys, service):
        feed(monkeypatch, "admin", "admin123", "5", "jane", "jane123", "9")
        shell.run(service)
        out = capsys.readouterr().out
        assert "Welcome, Jane Smith" in out
        assert "CUSTOMER MENU" in out
        assert "Invalid option." in out
