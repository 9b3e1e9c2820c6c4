# autotrack/models/user.py
"""
Account records. Created at startup only and never modified afterwards.
Passwords are compared as plain text; there is no hashing.
"""

from enum import Enum

from pydantic import BaseModel, Field


class UserRole(str, Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"


class User(BaseModel):
    id: str = Field(min_length=1)
    username: str = Field(min_length=1)
    password: str
    name: str
    role: UserRole

    class Config:
        frozen = True

    def __repr__(self):
        return f"<User {self.username} role={self.role.value}>"
