"""User Service - validate, transform, persist, and shape responses for user records.

Invariants:
    - Validation runs before any repository call (no partial side effects)
    - dob is parsed to a calendar date before it reaches the repository
    - age is computed from the clock at response time, never stored
    - Repository errors propagate unchanged; nothing is retried or defaulted
    - delete logs one record (success or failure) carrying user_id

Design Decisions:
    - Repository, validator, clock and logger are constructor-injected:
      no hidden process-wide state
    - Only Exception is caught in delete (for logging, then re-raised):
      asyncio.CancelledError passes straight through
"""

import logging
from datetime import date
from typing import Callable

from user_api.core.age import today_utc
from user_api.core.domain_types import UserId
from user_api.core.repository_protocols import UserRecord, UserRepository
from user_api.core.validation import UserValidator, parse_iso_date
from user_api.schemas.user import UserResponse

logger = logging.getLogger(__name__)


class UserService:
    """CRUD operations over user records with validation and derived age."""

    def __init__(
        self,
        repository: UserRepository,
        validator: UserValidator | None = None,
        clock: Callable[[], date] = today_utc,
        log: logging.Logger | None = None,
    ):
        self._repo = repository
        self._validator = validator or UserValidator()
        self._clock = clock
        self._log = log or logger

    async def create_user(self, name: str, raw_dob: str) -> UserResponse:
        dob = self._validated_dob(name, raw_dob)
        record = await self._repo.create(name, dob)
        return self._to_response(record)

    async def get_user(self, user_id: UserId) -> UserResponse:
        record = await self._repo.get(user_id)
        return self._to_response(record)

    async def list_users(self) -> list[UserResponse]:
        records = await self._repo.list_all()
        today = self._clock()
        return [UserResponse.from_record(r, today) for r in records]

    async def update_user(
        self, user_id: UserId, name: str, raw_dob: str,
    ) -> UserResponse:
        dob = self._validated_dob(name, raw_dob)
        record = await self._repo.update(user_id, name, dob)
        return self._to_response(record)

    async def delete_user(self, user_id: UserId) -> None:
        try:
            await self._repo.delete(user_id)
        except Exception as e:
            self._log.error(
                f"failed to delete user: {e}", extra={"user_id": user_id},
            )
            raise
        self._log.info("user deleted", extra={"user_id": user_id})

    def _validated_dob(self, name: str, raw_dob: str) -> date:
        self._validator.check({"name": name, "dob": raw_dob}, self._clock())
        return parse_iso_date(raw_dob)

    def _to_response(self, record: UserRecord) -> UserResponse:
        return UserResponse.from_record(record, self._clock())
