"""User Schemas - request and response DTOs for the /users endpoints.

Invariants:
    - UserCreate/UserUpdate carry raw strings; absent fields default to "" so the
      validator reports them as required instead of pydantic rejecting the body
    - UserResponse.age is computed at construction time from dob and "today"
    - dob serialized as an ISO calendar date (YYYY-MM-DD)

Design Decisions:
    - No Field(min_length=...) constraints on requests: rule order and message
      text are owned by UserValidator
"""

from datetime import date

from pydantic import BaseModel

from user_api.core.age import calculate_age
from user_api.core.repository_protocols import UserRecord


class UserCreate(BaseModel):
    """Create payload - validated by UserValidator, not by pydantic."""
    name: str = ""
    dob: str = ""


class UserUpdate(BaseModel):
    """Update payload - same shape and rules as UserCreate."""
    name: str = ""
    dob: str = ""


class UserResponse(BaseModel):
    """Public-facing user with derived age."""
    id: int
    name: str
    dob: date
    age: int

    @classmethod
    def from_record(cls, record: UserRecord, today: date) -> "UserResponse":
        return cls(
            id=record.id,
            name=record.name,
            dob=record.dob,
            age=calculate_age(record.dob, today),
        )
