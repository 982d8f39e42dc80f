"""Route Dependencies - wires the UserService to the SQL repository per request.

Design Decisions:
    - Service built per request: it is stateless, and tests override
      get_user_service to swap in the in-memory repository
"""

from fastapi import Depends

from user_api.infrastructure.database import DatabaseSessionManager, get_db_manager
from user_api.infrastructure.user_repository import SqlAlchemyUserRepository
from user_api.services.user_service import UserService


def get_user_service(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> UserService:
    return UserService(SqlAlchemyUserRepository(db))
