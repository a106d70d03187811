"""In-app notification model."""

from typing import Optional
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import Enum as SQLEnum, ForeignKey, Integer, Text

from .base import BaseModel
from .enums import NotificationCategory, enum_values


class Notification(BaseModel, SQLModel, table=True):
    """Notification delivered to a user's inbox."""

    __tablename__ = "notifications"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    title: str = Field(max_length=255, nullable=False)
    message: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    category: NotificationCategory = Field(
        default=NotificationCategory.GENERAL,
        sa_column=Column(
            SQLEnum(NotificationCategory, name="notificationcategory", values_callable=enum_values),
            nullable=False,
            default=NotificationCategory.GENERAL,
        ),
    )
    is_read: bool = Field(default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<Notification(id={self.id}, user_id={self.user_id}, category={self.category.value})>"

    def mark_as_read(self) -> None:
        """Mark notification as read."""
        if not self.is_read:
            self.is_read = True
            self.touch()
