# AutoTrack Rental: Domain Models
# Import all models here so callers can use `from autotrack.models import ...`

from autotrack.models.vehicle import Vehicle, VehicleCategory, VehicleStatus   # noqa
from autotrack.models.user import User, UserRole                               # noqa
from autotrack.models.booking import Booking, BookingStatus                    # noqa
