"""Tests for table definitions and timestamps."""

from datetime import timezone

import pytest

from src.models import Enrollment, Notification, Program, User, utc_now
from src.models.enums import UserRole
from src.repositories.user import UserRepository


def test_utc_now_is_timezone_aware():
    assert utc_now().tzinfo is timezone.utc


@pytest.mark.parametrize('model', [User, Program, Notification, Enrollment])
def test_created_at_column_is_timezone_aware(model):
    assert model.__table__.c.created_at.type.timezone is True


def test_enrollment_is_append_only():
    assert 'updated_at' not in Enrollment.__table__.c
    assert not hasattr(Enrollment, 'touch')


def test_program_keeps_update_timestamp():
    assert Program.__table__.c.updated_at.type.timezone is True


@pytest.mark.asyncio
async def test_account_insert_stores_creation_time(db_session):
    user = await UserRepository(db_session).create('nisha@example.com', UserRole.STUDENT)

    assert user.id is not None
    assert user.created_at is not None
