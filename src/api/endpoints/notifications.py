"""Notification inbox endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.database import get_db
from src.repositories.notification import NotificationRepository
from src.services.notification import NotificationService
from src.schemas.notification import NotificationResponse, NotificationListResponse

router = APIRouter()


async def get_notification_service(session: AsyncSession = Depends(get_db)) -> NotificationService:
    """Get notification service dependency."""
    return NotificationService(NotificationRepository(session))


@router.get("", response_model=NotificationListResponse)
async def get_notifications(
    user_id: int = Query(..., description="Recipient user id"),
    unread_only: bool = Query(False, description="Only return unread notifications"),
    notification_service: NotificationService = Depends(get_notification_service)
):
    """Get a user's notifications, newest first."""
    return await notification_service.list_notifications(user_id, unread_only)


@router.patch("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_as_read(
    notification_id: int,
    notification_service: NotificationService = Depends(get_notification_service)
):
    """Mark a notification as read."""
    return await notification_service.mark_as_read(notification_id)
