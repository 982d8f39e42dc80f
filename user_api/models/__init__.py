"""ORM Models - SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Models never leave the infrastructure layer; repositories map them to UserRecord

Design Decisions:
    - All models imported here so Base.metadata is complete for create_all and alembic
"""

from user_api.models.user import User  # noqa: F401
