"""In-Memory User Repository - UserRepository test double with the same contract.

Invariants:
    - A single asyncio.Lock guards the record map and the id counter
    - Ids start at 1 and increase monotonically; deleted ids are never reused
    - set_should_fail(True) makes every operation raise PersistenceError
    - The lock is held only for the map access, never across caller awaits

Design Decisions:
    - Records stored as frozen UserRecord: updates replace the entry, so a
      record handed to a caller never changes underneath it
"""

import asyncio
from datetime import date

from user_api.core.domain_types import UserId
from user_api.core.errors import PersistenceError, UserNotFoundError
from user_api.core.repository_protocols import UserRecord


class InMemoryUserRepository:
    """Dict-backed persistence for tests and local runs."""

    def __init__(self) -> None:
        self._users: dict[UserId, UserRecord] = {}
        self._next_id = 1
        self._should_fail = False
        self._lock = asyncio.Lock()

    def set_should_fail(self, fail: bool) -> None:
        self._should_fail = fail

    def count(self) -> int:
        return len(self._users)

    def _check_available(self, operation: str) -> None:
        if self._should_fail:
            raise PersistenceError("simulated storage failure", operation)

    async def create(self, name: str, dob: date) -> UserRecord:
        self._check_available("create")
        async with self._lock:
            record = UserRecord(id=UserId(self._next_id), name=name, dob=dob)
            self._users[record.id] = record
            self._next_id += 1
            return record

    async def get(self, user_id: UserId) -> UserRecord:
        self._check_available("get")
        async with self._lock:
            record = self._users.get(user_id)
        if record is None:
            raise UserNotFoundError(user_id)
        return record

    async def list_all(self) -> list[UserRecord]:
        self._check_available("list")
        async with self._lock:
            return [self._users[key] for key in sorted(self._users)]

    async def update(self, user_id: UserId, name: str, dob: date) -> UserRecord:
        self._check_available("update")
        async with self._lock:
            if user_id not in self._users:
                raise UserNotFoundError(user_id)
            record = UserRecord(id=user_id, name=name, dob=dob)
            self._users[user_id] = record
            return record

    async def delete(self, user_id: UserId) -> None:
        self._check_available("delete")
        async with self._lock:
            if self._users.pop(user_id, None) is None:
                raise UserNotFoundError(user_id)
