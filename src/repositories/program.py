"""Program repository for database operations."""

from typing import Dict, List, Optional, Set, Tuple
from sqlalchemy import select, func, desc
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.program import Program, Enrollment
from src.models.user import User, Profile


class ProgramRepository:
    """Repository for mentorship program operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        mentor_id: int,
        subject: str,
        community_link: str,
        capacity: int,
        description: Optional[str] = None
    ) -> Program:
        """Create a new active program."""
        program = Program(
            mentor_id=mentor_id,
            subject=subject,
            description=description,
            community_link=community_link,
            capacity=capacity,
            is_active=True
        )
        self.session.add(program)
        await self.session.commit()
        await self.session.refresh(program)
        return program

    async def get_by_id(self, program_id: int) -> Optional[Program]:
        """Get program by ID."""
        query = select(Program).where(Program.id == program_id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_active_for_update(self, program_id: int) -> Optional[Program]:
        """Get an active program and lock its row until the transaction ends.

        On PostgreSQL this is ``SELECT ... FOR UPDATE``; concurrent joins
        for the same program queue behind the lock. Dialects without row
        locks (SQLite) ignore the clause.
        """
        query = (
            select(Program)
            .where(Program.id == program_id, Program.is_active.is_(True))
            .with_for_update()
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_joined_counts(self) -> Dict[int, int]:
        """Get enrollment counts keyed by program id."""
        query = (
            select(Enrollment.program_id, func.count(Enrollment.id))
            .group_by(Enrollment.program_id)
        )
        result = await self.session.execute(query)
        return {program_id: count for program_id, count in result.all()}

    async def get_all_with_counts(self) -> List[Tuple[Program, int]]:
        """Get all programs, newest first, with their live enrollment count."""
        query = select(Program).order_by(desc(Program.created_at), desc(Program.id))
        result = await self.session.execute(query)
        programs = result.scalars().all()

        counts = await self.get_joined_counts()
        return [(program, counts.get(program.id, 0)) for program in programs]

    async def get_all_with_mentors(self) -> List[Tuple[Program, User, Optional[Profile], int]]:
        """Get all programs with mentor account, mentor profile and count."""
        query = (
            select(Program, User, Profile)
            .join(User, User.id == Program.mentor_id)
            .outerjoin(Profile, Profile.user_id == User.id)
            .order_by(desc(Program.created_at), desc(Program.id))
        )
        result = await self.session.execute(query)
        rows = result.all()

        counts = await self.get_joined_counts()
        return [
            (program, mentor, profile, counts.get(program.id, 0))
            for program, mentor, profile in rows
        ]

    async def get_program_ids_joined_by(self, mentee_id: int) -> Set[int]:
        """Get ids of programs the given account is enrolled in."""
        query = select(Enrollment.program_id).where(Enrollment.mentee_id == mentee_id)
        result = await self.session.execute(query)
        return set(result.scalars().all())
