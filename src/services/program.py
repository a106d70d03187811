"""Program registry business logic services."""

import asyncio
import logging
from typing import Optional

from sqlalchemy.exc import DBAPIError, IntegrityError

from src.core.config import settings
from src.core.exceptions import ValidationError, NotFoundError, InfrastructureError
from src.core.redis import RedisCache
from src.repositories.program import ProgramRepository
from src.repositories.user import UserRepository
from src.schemas.program import (
    ProgramCreate,
    ProgramResponse,
    ProgramListItem,
    ProgramListResponse,
    MentorSummary,
    AdminProgramItem,
    AdminProgramListResponse,
)
from src.utils.messages import get_message
from src.utils.sanitize_html import sanitize_description

logger = logging.getLogger(__name__)


class ProgramService:
    """Service for creating and listing mentorship programs."""

    def __init__(
        self,
        program_repo: ProgramRepository,
        user_repo: UserRepository,
        cache: Optional[RedisCache] = None
    ):
        self.program_repo = program_repo
        self.user_repo = user_repo
        self.cache = cache

    async def create_program(self, program_data: ProgramCreate) -> ProgramResponse:
        """Create a new program owned by the resolved mentor account."""
        subject = (program_data.subject or "").strip()
        community_link = (program_data.community_link or "").strip()
        capacity = program_data.capacity

        if program_data.mentor_id is None:
            raise ValidationError(get_message("program", "mentor_required"))
        if not subject:
            raise ValidationError(get_message("program", "subject_required"))
        if not community_link:
            raise ValidationError(get_message("program", "community_link_required"))
        if capacity is None:
            raise ValidationError(get_message("program", "capacity_required"))
        if capacity <= 0:
            raise ValidationError(get_message("program", "capacity_invalid"))

        description = (program_data.description or "").strip()
        description = sanitize_description(description) if description else None

        try:
            mentor_id = await self.user_repo.resolve_account_id(program_data.mentor_id)
            if mentor_id is None:
                raise NotFoundError(
                    get_message("user", "mentor_not_found", mentor_id=program_data.mentor_id)
                )

            program = await self.program_repo.create(
                mentor_id=mentor_id,
                subject=subject,
                community_link=community_link,
                capacity=capacity,
                description=description
            )
        except IntegrityError as e:
            # Mentor account removed between resolution and insert
            await self.program_repo.session.rollback()
            raise NotFoundError(
                get_message("user", "mentor_not_found", mentor_id=program_data.mentor_id)
            ) from e
        except (DBAPIError, asyncio.TimeoutError) as e:
            await self.program_repo.session.rollback()
            logger.error(f"Store failure while creating program: {e}")
            raise InfrastructureError() from e

        logger.info(
            f"Program {program.id} '{program.subject}' created by mentor {mentor_id} "
            f"with capacity {program.capacity}"
        )
        await self.invalidate_admin_listing()

        return ProgramResponse.model_validate(program)

    async def list_programs(self, viewer_id: Optional[int] = None) -> ProgramListResponse:
        """Get all programs, newest first, annotated for the viewer."""
        rows = await self.program_repo.get_all_with_counts()

        joined_ids = set()
        if viewer_id is not None:
            viewer_account_id = await self.user_repo.resolve_account_id(viewer_id)
            if viewer_account_id is not None:
                joined_ids = await self.program_repo.get_program_ids_joined_by(viewer_account_id)

        items = []
        for program, joined_count in rows:
            item = ProgramListItem.model_validate(program)
            item.joined_count = joined_count
            item.joined_by_viewer = program.id in joined_ids
            items.append(item)

        return ProgramListResponse(items=items, total=len(items))

    async def admin_list_programs(self) -> AdminProgramListResponse:
        """Get every program with its mentor summary and live count."""
        if self.cache:
            cached = await self.cache.get(settings.PROGRAM_LIST_CACHE_KEY)
            if cached is not None:
                return AdminProgramListResponse.model_validate(cached)

        items = []
        for program, mentor, profile, joined_count in await self.program_repo.get_all_with_mentors():
            summary = MentorSummary(
                id=mentor.id,
                name=profile.name if profile else mentor.email,
                email=profile.email if profile else mentor.email,
                department=profile.department if profile else None,
                designation=profile.designation if profile else None
            )
            items.append(AdminProgramItem.model_validate({
                **ProgramResponse.model_validate(program).model_dump(),
                "joined_count": joined_count,
                "mentor": summary
            }))

        response = AdminProgramListResponse(items=items, total=len(items))

        if self.cache:
            await self.cache.set(
                settings.PROGRAM_LIST_CACHE_KEY,
                response.model_dump(mode="json"),
                expire=settings.PROGRAM_LIST_CACHE_TTL
            )

        return response

    async def invalidate_admin_listing(self) -> None:
        """Drop the cached oversight listing."""
        if self.cache:
            await self.cache.delete(settings.PROGRAM_LIST_CACHE_KEY)
