"""Notification delivery and inbox services."""

import asyncio
import logging
from typing import Optional, Set

from src.core.database import Database
from src.core.exceptions import NotFoundError
from src.models.enums import NotificationCategory
from src.repositories.notification import NotificationRepository
from src.schemas.notification import NotificationResponse, NotificationListResponse
from src.utils.messages import get_message

logger = logging.getLogger(__name__)


class NotificationEmitter:
    """Fire-and-forget notification writer.

    ``emit`` schedules delivery on the running event loop and returns
    immediately. Each delivery uses its own session, so a failed write
    can never affect the caller's transaction. Failures are logged and
    dropped.
    """

    def __init__(self, database: Database):
        self.database = database
        self._pending: Set[asyncio.Task] = set()

    def emit(
        self,
        user_id: int,
        title: str,
        message: Optional[str],
        category: NotificationCategory = NotificationCategory.GENERAL
    ) -> None:
        """Schedule a notification for ``user_id``. Never raises."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            logger.warning(f"Notification for user {user_id} not scheduled: {e}")
            return

        task = loop.create_task(self._deliver(user_id, title, message, category))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _deliver(
        self,
        user_id: int,
        title: str,
        message: Optional[str],
        category: NotificationCategory
    ) -> None:
        try:
            async with self.database.session() as session:
                await NotificationRepository(session).create(user_id, title, message, category)
            logger.debug(f"Notification '{category.value}' delivered to user {user_id}")
        except Exception as e:
            logger.warning(
                f"Failed to deliver '{category.value}' notification to user {user_id}: {e}",
                exc_info=True
            )

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every scheduled delivery to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)


class NotificationService:
    """Service for reading and acknowledging notifications."""

    def __init__(self, notification_repo: NotificationRepository):
        self.notification_repo = notification_repo

    async def list_notifications(
        self,
        user_id: int,
        unread_only: bool = False
    ) -> NotificationListResponse:
        """Get a user's notifications."""
        notifications = await self.notification_repo.get_for_user(user_id, unread_only)
        items = [NotificationResponse.model_validate(n) for n in notifications]

        return NotificationListResponse(
            items=items,
            total=len(items),
            unread_count=sum(1 for item in items if not item.is_read)
        )

    async def mark_as_read(self, notification_id: int) -> NotificationResponse:
        """Mark a notification as read."""
        notification = await self.notification_repo.mark_as_read(notification_id)
        if not notification:
            raise NotFoundError(get_message("notification", "not_found"))

        return NotificationResponse.model_validate(notification)
