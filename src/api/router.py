"""API router configuration."""

from fastapi import APIRouter

from src.api.endpoints import program, notifications
from src.schemas.shared import ErrorResponse

# Create main API router
api_router = APIRouter()

# ===== MENTORSHIP ENDPOINTS =====

# Programs - create, list and join mentorship programs
api_router.include_router(
    program.router,
    prefix="/programs",
    tags=["Mentorship Programs"],
    responses={
        404: {"model": ErrorResponse, "description": "Program or user not found"},
        409: {"model": ErrorResponse, "description": "Program is full or already joined"},
        422: {"description": "Validation Error"},
        503: {"model": ErrorResponse, "description": "Service temporarily unavailable"},
    },
)

# Admin - oversight listing across all programs
api_router.include_router(
    program.admin_router,
    prefix="/admin",
    tags=["Admin"],
    responses={
        503: {"model": ErrorResponse, "description": "Service temporarily unavailable"},
    },
)

# ===== NOTIFICATION ENDPOINTS =====

api_router.include_router(
    notifications.router,
    prefix="/notifications",
    tags=["Notifications"],
    responses={
        404: {"model": ErrorResponse, "description": "Notification not found"},
        422: {"description": "Validation Error"},
    },
)


# Export for main.py
def get_api_router():
    """Get configured API router with all endpoints."""
    return api_router
