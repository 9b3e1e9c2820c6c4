# autotrack/services/session.py
"""
Per-caller session handed out by RentalService.login().
The role carried here is the capability every gated operation checks.
"""

from dataclasses import dataclass
from typing import Optional

from autotrack.models.user import User, UserRole


@dataclass
class Session:
    user: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def role(self) -> Optional[UserRole]:
        return self.user.role if self.user else None

    @property
    def username(self) -> Optional[str]:
        return self.user.username if self.user else None

    def clear(self):
        self.user = None
