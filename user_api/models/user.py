"""User ORM - the single persisted table.

Invariants:
    - id is an autoincrement integer primary key assigned by the database
    - name is non-nullable, at most 255 characters
    - dob is a calendar date with no time-of-day component

Design Decisions:
    - age is NOT a column: it is derived at response time from dob
"""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from user_api.core.domain_types import NAME_MAX_LENGTH
from user_api.db.base import Base


class User(Base):
    """User row - id, name, date of birth."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    dob: Mapped[date] = mapped_column(Date, nullable=False)
