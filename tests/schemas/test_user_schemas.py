"""User Schemas - request defaults and response serialization.

Invariants:
    - Absent request fields default to "" so the validator reports them
    - UserResponse.dob serializes as YYYY-MM-DD
    - from_record computes age against the given date
"""

from datetime import date

import pytest
from pydantic import ValidationError

from user_api.core.domain_types import UserId
from user_api.core.repository_protocols import UserRecord
from user_api.schemas.user import UserCreate, UserResponse, UserUpdate


def test_create_defaults_missing_fields_to_empty():
    body = UserCreate()
    assert body.name == ""
    assert body.dob == ""


def test_update_keeps_raw_strings():
    body = UserUpdate(name="  Jane ", dob="01-15-1990")
    assert body.name == "  Jane "
    assert body.dob == "01-15-1990"


def test_create_rejects_non_string_name():
    with pytest.raises(ValidationError):
        UserCreate(name=123, dob="1990-01-15")


def test_response_from_record_computes_age():
    record = UserRecord(id=UserId(3), name="John Doe", dob=date(1990, 1, 15))
    resp = UserResponse.from_record(record, date(2024, 1, 14))
    assert resp.id == 3
    assert resp.name == "John Doe"
    assert resp.age == 33


def test_response_serializes_dob_as_iso_date():
    resp = UserResponse(id=1, name="A", dob=date(1990, 1, 15), age=34)
    assert resp.model_dump(mode="json") == {
        "id": 1, "name": "A", "dob": "1990-01-15", "age": 34,
    }
