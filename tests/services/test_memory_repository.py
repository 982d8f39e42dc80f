"""In-Memory Repository - contract of the test double.

Invariants:
    - Ids start at 1, increase monotonically and are never reused
    - get/update/delete of unknown ids raise UserNotFoundError
    - set_should_fail makes every operation raise PersistenceError
    - Concurrent creates never lose records or share ids
"""

import asyncio
from datetime import date

import pytest

from user_api.core.domain_types import UserId
from user_api.core.errors import PersistenceError, UserNotFoundError
from user_api.core.repository_protocols import UserRecord
from user_api.infrastructure.memory_repository import InMemoryUserRepository

DOB = date(1990, 1, 15)


async def test_create_assigns_ids_from_one(memory_repo):
    first = await memory_repo.create("A", DOB)
    second = await memory_repo.create("B", DOB)
    assert first == UserRecord(id=UserId(1), name="A", dob=DOB)
    assert second.id == 2


async def test_deleted_ids_are_not_reused(memory_repo):
    first = await memory_repo.create("A", DOB)
    await memory_repo.delete(first.id)
    second = await memory_repo.create("B", DOB)
    assert second.id == 2


async def test_get_returns_stored_record(memory_repo):
    created = await memory_repo.create("A", DOB)
    assert await memory_repo.get(created.id) == created


async def test_list_all_ordered_by_id(memory_repo):
    for name in ("C", "A", "B"):
        await memory_repo.create(name, DOB)
    assert [r.id for r in await memory_repo.list_all()] == [1, 2, 3]


async def test_update_replaces_fields(memory_repo):
    created = await memory_repo.create("A", DOB)
    updated = await memory_repo.update(created.id, "B", date(2000, 1, 1))
    assert updated == UserRecord(id=created.id, name="B", dob=date(2000, 1, 1))
    assert created.name == "A"


@pytest.mark.parametrize("operation", ["get", "delete"])
async def test_unknown_id_not_found(memory_repo, operation):
    with pytest.raises(UserNotFoundError):
        await getattr(memory_repo, operation)(UserId(5))


async def test_update_unknown_id_not_found(memory_repo):
    with pytest.raises(UserNotFoundError):
        await memory_repo.update(UserId(5), "A", DOB)


async def test_should_fail_raises_persistence_error(memory_repo):
    await memory_repo.create("A", DOB)
    memory_repo.set_should_fail(True)
    with pytest.raises(PersistenceError):
        await memory_repo.list_all()
    with pytest.raises(PersistenceError):
        await memory_repo.get(UserId(1))
    memory_repo.set_should_fail(False)
    assert memory_repo.count() == 1


async def test_concurrent_creates_get_distinct_ids():
    repo = InMemoryUserRepository()
    records = await asyncio.gather(
        *(repo.create(f"user-{i}", DOB) for i in range(50))
    )
    assert sorted(r.id for r in records) == list(range(1, 51))
    assert repo.count() == 50
