"""Enums for database models."""

from enum import Enum


class UserRole(str, Enum):
    """Account role enum."""
    ADMIN = "admin"
    ALUMNI = "alumni"
    STUDENT = "student"
    RECRUITER = "recruiter"


class UserStatus(str, Enum):
    """Account status enum."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class ProfileStatus(str, Enum):
    """Admin approval status of an alumni/student profile."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class NotificationCategory(str, Enum):
    """Notification category tag."""
    PROGRAM_FULL = "program_full"
    ALREADY_JOINED = "already_joined"
    PROGRAM_JOINED = "program_joined"
    GENERAL = "general"


def enum_values(enum_cls):
    """Persist enum values (not member names) in SQL enum columns."""
    return [member.value for member in enum_cls]
