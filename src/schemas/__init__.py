"""Schemas initialization."""

# Shared schemas
from .shared import (
    ErrorResponse,
    StatusResponse,
)

# Mentorship program schemas
from .program import (
    ProgramCreate,
    ProgramResponse,
    ProgramListItem,
    ProgramListResponse,
    MentorSummary,
    AdminProgramItem,
    AdminProgramListResponse,
    EnrollmentCreate,
    EnrollmentResponse,
)

# Notification schemas
from .notification import (
    NotificationResponse,
    NotificationListResponse,
)

__all__ = [
    # Shared
    "ErrorResponse",
    "StatusResponse",

    # Mentorship programs
    "ProgramCreate",
    "ProgramResponse",
    "ProgramListItem",
    "ProgramListResponse",
    "MentorSummary",
    "AdminProgramItem",
    "AdminProgramListResponse",
    "EnrollmentCreate",
    "EnrollmentResponse",

    # Notifications
    "NotificationResponse",
    "NotificationListResponse",
]
