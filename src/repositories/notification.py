"""Notification repository for CRUD operations."""

from typing import List, Optional
from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.notification import Notification
from src.models.enums import NotificationCategory


class NotificationRepository:
    """Notification repository for CRUD operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        user_id: int,
        title: str,
        message: Optional[str],
        category: NotificationCategory = NotificationCategory.GENERAL
    ) -> Notification:
        """Create a notification."""
        notification = Notification(
            user_id=user_id,
            title=title,
            message=message,
            category=category,
            is_read=False
        )
        self.session.add(notification)
        await self.session.commit()
        await self.session.refresh(notification)
        return notification

    async def get_by_id(self, notification_id: int) -> Optional[Notification]:
        """Get notification by ID."""
        query = select(Notification).where(Notification.id == notification_id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_for_user(self, user_id: int, unread_only: bool = False) -> List[Notification]:
        """Get a user's notifications, newest first."""
        query = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            query = query.where(Notification.is_read.is_(False))
        query = query.order_by(desc(Notification.created_at), desc(Notification.id))

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def mark_as_read(self, notification_id: int) -> Optional[Notification]:
        """Mark a notification as read."""
        notification = await self.get_by_id(notification_id)
        if not notification:
            return None

        notification.mark_as_read()
        await self.session.commit()
        await self.session.refresh(notification)
        return notification
