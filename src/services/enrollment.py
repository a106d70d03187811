"""Enrollment business logic: joining mentorship programs.

A join counts the program's enrollments and inserts the new one as a
single unit per program. Two guards make that unit atomic:

* an in-process lock per program id, which serializes joins handled by
  this worker (and is the only guard on SQLite);
* ``SELECT ... FOR UPDATE`` on the program row inside the join
  transaction, which serializes joins across workers on PostgreSQL. The
  count is issued after the row lock is granted, so under READ COMMITTED
  it sees every enrollment committed by the previous holder.

The ``(program_id, mentee_id)`` unique constraint rejects duplicate joins
independently of both locks.
"""

import asyncio
import logging
from typing import Optional

from sqlalchemy.exc import DBAPIError, IntegrityError

from src.core.exceptions import (
    ValidationError,
    NotFoundError,
    ProgramNotFoundError,
    CapacityError,
    ConflictError,
    InfrastructureError,
)
from src.core.locks import ProgramLockRegistry
from src.models.enums import NotificationCategory
from src.repositories.enrollment import EnrollmentRepository
from src.repositories.program import ProgramRepository
from src.repositories.user import UserRepository
from src.schemas.program import EnrollmentResponse
from src.services.notification import NotificationEmitter
from src.services.program import ProgramService
from src.utils.messages import get_message

logger = logging.getLogger(__name__)


class EnrollmentService:
    """Service enrolling mentees into programs under the capacity invariant."""

    def __init__(
        self,
        program_repo: ProgramRepository,
        enrollment_repo: EnrollmentRepository,
        user_repo: UserRepository,
        locks: ProgramLockRegistry,
        notifier: NotificationEmitter,
        program_service: Optional[ProgramService] = None
    ):
        self.program_repo = program_repo
        self.enrollment_repo = enrollment_repo
        self.user_repo = user_repo
        self.locks = locks
        self.notifier = notifier
        self.program_service = program_service

    async def join_program(self, program_id: int, mentee_id: Optional[int]) -> EnrollmentResponse:
        """Enroll a mentee in a program.

        Raises:
            ValidationError: mentee id missing.
            NotFoundError: mentee unresolvable, or program absent/inactive.
            CapacityError: the program is full.
            ConflictError: the mentee already holds an enrollment here.
            InfrastructureError: the store failed or timed out.
        """
        if mentee_id is None:
            raise ValidationError(get_message("program", "mentee_required"))

        session = self.enrollment_repo.session

        try:
            account_id = await self.user_repo.resolve_account_id(mentee_id)
            if account_id is None:
                raise NotFoundError(get_message("user", "mentee_not_found", mentee_id=mentee_id))

            async with self.locks.hold(program_id):
                enrollment = await self._enroll(program_id, account_id)
        except (DBAPIError, asyncio.TimeoutError) as e:
            await session.rollback()
            logger.error(f"Store failure while joining program {program_id}: {e}")
            raise InfrastructureError() from e

        if self.program_service:
            await self.program_service.invalidate_admin_listing()

        return EnrollmentResponse.model_validate(enrollment)

    async def _enroll(self, program_id: int, mentee_id: int):
        """Count and insert inside one transaction. Caller holds the program lock."""
        session = self.enrollment_repo.session

        program = await self.program_repo.get_active_for_update(program_id)
        if not program:
            await session.rollback()
            raise ProgramNotFoundError(program_id)

        # Rollback expires ORM instances; keep plain values for notifications
        subject = program.subject
        community_link = program.community_link
        capacity = program.capacity

        joined_count = await self.enrollment_repo.count_for_program(program_id)

        if joined_count >= capacity:
            existing = await self.enrollment_repo.get(program_id, mentee_id)
            await session.rollback()

            if existing:
                self._notify_already_joined(mentee_id, subject)
                raise ConflictError(program_id, mentee_id)

            logger.info(f"Mentee {mentee_id} rejected from full program {program_id} ({joined_count}/{capacity})")
            self.notifier.emit(
                mentee_id,
                get_message("notification", "full_title"),
                get_message("notification", "full_body", subject=subject),
                NotificationCategory.PROGRAM_FULL
            )
            raise CapacityError(program_id)

        try:
            enrollment = await self.enrollment_repo.add(program_id, mentee_id)
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            existing = await self.enrollment_repo.get(program_id, mentee_id)
            if not existing:
                # Foreign key failure: the mentee account was removed after resolution
                logger.warning(f"Enrollment insert for mentee {mentee_id} in program {program_id} failed: {e}")
                raise NotFoundError(
                    get_message("user", "mentee_not_found", mentee_id=mentee_id)
                ) from e

            self._notify_already_joined(mentee_id, subject)
            raise ConflictError(program_id, mentee_id)

        logger.info(f"Mentee {mentee_id} joined program {program_id} ({joined_count + 1}/{capacity})")
        self.notifier.emit(
            mentee_id,
            get_message("notification", "joined_title"),
            get_message("notification", "joined_body", subject=subject, community_link=community_link),
            NotificationCategory.PROGRAM_JOINED
        )
        return enrollment

    def _notify_already_joined(self, mentee_id: int, subject: str) -> None:
        logger.info(f"Mentee {mentee_id} already joined '{subject}'")
        self.notifier.emit(
            mentee_id,
            get_message("notification", "already_joined_title"),
            get_message("notification", "already_joined_body", subject=subject),
            NotificationCategory.ALREADY_JOINED
        )
