"""Database models initialization."""

# Base classes
from .base import BaseModel, ImmutableModel, CreatedAtMixin, TimestampMixin, utc_now

# Identity models
from .user import User, Profile

# Mentorship models
from .program import Program, Enrollment

# Notifications
from .notification import Notification

# Enums
from .enums import (
    UserRole,
    UserStatus,
    ProfileStatus,
    NotificationCategory,
)

__all__ = [
    # Base classes
    "BaseModel",
    "ImmutableModel",
    "CreatedAtMixin",
    "TimestampMixin",
    "utc_now",

    # Identity models
    "User",
    "Profile",

    # Mentorship models
    "Program",
    "Enrollment",

    # Notifications
    "Notification",

    # Enums
    "UserRole",
    "UserStatus",
    "ProfileStatus",
    "NotificationCategory",
]
