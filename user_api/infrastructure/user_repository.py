"""SQL User Repository - UserRepository backed by the `users` table.

Invariants:
    - One DB session per operation, opened and closed inside the call
    - SQLAlchemy errors surface as PersistenceError (mapped by DatabaseSessionManager)
    - Missing ids raise UserNotFoundError; ORM rows never escape as return values

Design Decisions:
    - Load-then-mutate for update/delete: "not found" is detected on the same
      session that performs the write, portable across PostgreSQL and SQLite
"""

import logging
from datetime import date

from sqlalchemy import select

from user_api.core.domain_types import UserId
from user_api.core.errors import UserNotFoundError
from user_api.core.repository_protocols import UserRecord
from user_api.infrastructure.database import DatabaseSessionManager
from user_api.models.user import User

logger = logging.getLogger(__name__)


def _to_record(row: User) -> UserRecord:
    return UserRecord(id=UserId(row.id), name=row.name, dob=row.dob)


class SqlAlchemyUserRepository:
    """Relational persistence for user records."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def create(self, name: str, dob: date) -> UserRecord:
        async with self._db.session() as session:
            row = User(name=name, dob=dob)
            session.add(row)
            await session.commit()
            await session.refresh(row)
            return _to_record(row)

    async def get(self, user_id: UserId) -> UserRecord:
        async with self._db.session() as session:
            row = await session.get(User, user_id)
            if row is None:
                raise UserNotFoundError(user_id)
            return _to_record(row)

    async def list_all(self) -> list[UserRecord]:
        async with self._db.session() as session:
            result = await session.execute(select(User).order_by(User.id))
            return [_to_record(row) for row in result.scalars().all()]

    async def update(self, user_id: UserId, name: str, dob: date) -> UserRecord:
        async with self._db.session() as session:
            row = await session.get(User, user_id, with_for_update=True)
            if row is None:
                raise UserNotFoundError(user_id)
            row.name = name
            row.dob = dob
            await session.commit()
            return _to_record(row)

    async def delete(self, user_id: UserId) -> None:
        async with self._db.session() as session:
            row = await session.get(User, user_id)
            if row is None:
                raise UserNotFoundError(user_id)
            await session.delete(row)
            await session.commit()
