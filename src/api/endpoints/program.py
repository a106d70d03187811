"""Mentorship program endpoints."""

from fastapi import APIRouter, Depends, Query, Request, status
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.database import get_db
from src.repositories.enrollment import EnrollmentRepository
from src.repositories.program import ProgramRepository
from src.repositories.user import UserRepository
from src.services.enrollment import EnrollmentService
from src.services.program import ProgramService
from src.schemas.program import (
    ProgramCreate,
    ProgramResponse,
    ProgramListResponse,
    AdminProgramListResponse,
    EnrollmentCreate,
    EnrollmentResponse,
)

router = APIRouter()
admin_router = APIRouter()


# ===== DEPENDENCIES =====

async def get_program_service(
    request: Request,
    session: AsyncSession = Depends(get_db)
) -> ProgramService:
    """Get program service dependency."""
    return ProgramService(
        ProgramRepository(session),
        UserRepository(session),
        cache=request.app.state.cache
    )


async def get_enrollment_service(
    request: Request,
    session: AsyncSession = Depends(get_db),
    program_service: ProgramService = Depends(get_program_service)
) -> EnrollmentService:
    """Get enrollment service dependency."""
    return EnrollmentService(
        program_repo=ProgramRepository(session),
        enrollment_repo=EnrollmentRepository(session),
        user_repo=UserRepository(session),
        locks=request.app.state.program_locks,
        notifier=request.app.state.notifier,
        program_service=program_service
    )


# ===== PROGRAM ENDPOINTS =====

@router.post("", response_model=ProgramResponse, status_code=status.HTTP_201_CREATED)
async def create_program(
    program_data: ProgramCreate,
    program_service: ProgramService = Depends(get_program_service)
):
    """Create a new mentorship program."""
    return await program_service.create_program(program_data)


@router.get("", response_model=ProgramListResponse)
async def get_programs(
    viewer_id: Optional[int] = Query(None, description="Annotate programs joined by this user"),
    program_service: ProgramService = Depends(get_program_service)
):
    """Get all programs with live joined counts."""
    return await program_service.list_programs(viewer_id)


@router.post(
    "/{program_id}/join",
    response_model=EnrollmentResponse,
    status_code=status.HTTP_201_CREATED
)
async def join_program(
    program_id: int,
    enrollment_data: EnrollmentCreate,
    enrollment_service: EnrollmentService = Depends(get_enrollment_service)
):
    """Join a program as a mentee."""
    return await enrollment_service.join_program(program_id, enrollment_data.mentee_id)


# ===== ADMIN ENDPOINTS =====

@admin_router.get("/programs", response_model=AdminProgramListResponse)
async def admin_get_programs(
    program_service: ProgramService = Depends(get_program_service)
):
    """Get all programs with mentor summaries for oversight."""
    return await program_service.admin_list_programs()
