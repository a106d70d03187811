"""Enrollment repository.

Methods here never commit: the enrollment service owns the transaction
that spans the capacity count and the insert.
"""

from typing import Optional
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.program import Enrollment


class EnrollmentRepository:
    """Repository for enrollment rows."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def count_for_program(self, program_id: int) -> int:
        """Count enrollments of a program."""
        query = select(func.count(Enrollment.id)).where(Enrollment.program_id == program_id)
        result = await self.session.execute(query)
        return result.scalar_one()

    async def get(self, program_id: int, mentee_id: int) -> Optional[Enrollment]:
        """Get the enrollment of a mentee in a program."""
        query = select(Enrollment).where(
            Enrollment.program_id == program_id,
            Enrollment.mentee_id == mentee_id
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def add(self, program_id: int, mentee_id: int) -> Enrollment:
        """Insert an enrollment and flush so uniqueness violations surface now."""
        enrollment = Enrollment(program_id=program_id, mentee_id=mentee_id)
        self.session.add(enrollment)
        await self.session.flush()
        return enrollment
