"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - Persistence accessed only through the UserRepository Protocol
    - list_all returns records ordered by id
    - get/update/delete raise UserNotFoundError for unknown ids; store failures
      raise PersistenceError - never a sentinel return value
    - UserRecord is immutable: id is assigned once by the repository

Design Decisions:
    - Protocol over ABC: structural subtyping, SQL adapter and in-memory double
      share no base class
    - Async in Protocol: implementations do IO; the service awaits them around
      the pure validation and age logic
"""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from user_api.core.domain_types import UserId


@dataclass(frozen=True)
class UserRecord:
    """Persisted user as seen by the domain - no ORM state attached."""
    id: UserId
    name: str
    dob: date


class UserRepository(Protocol):
    """Contract for user persistence - implemented by shell."""
    async def create(self, name: str, dob: date) -> UserRecord: ...
    async def get(self, user_id: UserId) -> UserRecord: ...
    async def list_all(self) -> list[UserRecord]: ...
    async def update(self, user_id: UserId, name: str, dob: date) -> UserRecord: ...
    async def delete(self, user_id: UserId) -> None: ...
