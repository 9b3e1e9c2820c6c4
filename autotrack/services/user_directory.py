# autotrack/services/user_directory.py
"""User Directory: account lookup. The credential match is the whole of authentication."""

from typing import Optional

from autotrack.models.user import User, UserRole
from autotrack.utils.logger import get_logger

logger = get_logger(__name__)


class UserDirectory:
    def __init__(self):
        self._users: list[User] = []

    def add(self, user: User) -> bool:
        """Seed-time registration. Rejects a repeated id or username."""
        if any(u.id == user.id or u.username == user.username for u in self._users):
            logger.warning(f"[AUTH] Duplicate account {user.id}/{user.username} — skipped")
            return False
        self._users.append(user)
        return True

    def find_by_credentials(self, username: str, password: str) -> Optional[User]:
        """Exact, case-sensitive match on both username and password."""
        return next(
            (u for u in self._users if u.username == username and u.password == password),
            None,
        )

    @staticmethod
    def is_admin(user: Optional[User]) -> bool:
        return user is not None and user.role == UserRole.ADMIN

    def all(self) -> list[User]:
        return list(self._users)
