"""Tests for notification delivery and the inbox service."""

import logging
from unittest.mock import MagicMock

import pytest

from src.core.exceptions import NotFoundError
from src.models.enums import NotificationCategory
from src.repositories.notification import NotificationRepository
from src.services.notification import NotificationEmitter, NotificationService


class TestNotificationEmitter:

    @pytest.mark.asyncio
    async def test_emit_delivers_after_drain(self, notifier, make_user, database):
        user = await make_user()

        notifier.emit(user.id, 'Hello', 'Welcome aboard', NotificationCategory.GENERAL)
        assert notifier.pending == 1
        await notifier.drain()

        assert notifier.pending == 0
        async with database.session() as session:
            notifications = await NotificationRepository(session).get_for_user(user.id)
        assert [n.title for n in notifications] == ['Hello']

    @pytest.mark.asyncio
    async def test_delivery_failure_is_logged_not_raised(self, caplog):
        broken = MagicMock()
        broken.session.side_effect = RuntimeError('store down')
        emitter = NotificationEmitter(broken)

        with caplog.at_level(logging.WARNING, logger='src.services.notification'):
            emitter.emit(1, 'Program full', None, NotificationCategory.PROGRAM_FULL)
            await emitter.drain()

        assert 'Failed to deliver' in caplog.text

    def test_emit_without_running_loop_is_dropped(self, caplog):
        emitter = NotificationEmitter(MagicMock())

        with caplog.at_level(logging.WARNING, logger='src.services.notification'):
            emitter.emit(1, 'Program full', None, NotificationCategory.PROGRAM_FULL)

        assert emitter.pending == 0
        assert 'not scheduled' in caplog.text


class TestNotificationService:

    @pytest.mark.asyncio
    async def test_list_and_mark_as_read(self, db_session, make_user):
        user = await make_user()
        repo = NotificationRepository(db_session)
        first = await repo.create(user.id, 'First', None)
        await repo.create(user.id, 'Second', None)
        service = NotificationService(repo)

        await service.mark_as_read(first.id)

        inbox = await service.list_notifications(user.id)
        assert inbox.total == 2
        assert inbox.unread_count == 1
        assert [item.title for item in inbox.items] == ['Second', 'First']

        unread = await service.list_notifications(user.id, unread_only=True)
        assert [item.title for item in unread.items] == ['Second']

    @pytest.mark.asyncio
    async def test_mark_unknown_notification(self, db_session):
        service = NotificationService(NotificationRepository(db_session))

        with pytest.raises(NotFoundError):
            await service.mark_as_read(9999)
