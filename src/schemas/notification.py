"""Notification schemas."""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime

from src.models.enums import NotificationCategory


class NotificationResponse(BaseModel):
    """Schema for Notification response."""
    id: int
    user_id: int
    title: str
    message: Optional[str] = None
    category: NotificationCategory
    is_read: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotificationListResponse(BaseModel):
    """A user's notifications, newest first."""
    items: List[NotificationResponse] = Field(..., description="List of notifications")
    total: int = Field(..., description="Number of notifications returned")
    unread_count: int = Field(..., description="Number of unread notifications returned")
