"""Mentorship program and enrollment models."""

from typing import Optional
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import CheckConstraint, ForeignKey, Integer, Text, UniqueConstraint

from .base import BaseModel, ImmutableModel


class Program(BaseModel, SQLModel, table=True):
    """Mentor-defined mentorship cohort with a fixed capacity."""

    __tablename__ = "mentorship_programs"
    __table_args__ = (
        CheckConstraint("capacity > 0", name="ck_program_capacity_positive"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    mentor_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    subject: str = Field(max_length=255, nullable=False, index=True, description="Program subject")
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    community_link: str = Field(max_length=500, nullable=False, description="External community (chat) link")
    capacity: int = Field(nullable=False, description="Maximum number of enrollments, fixed at creation")
    is_active: bool = Field(default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Program(id={self.id}, subject={self.subject}, capacity={self.capacity})>"


class Enrollment(ImmutableModel, SQLModel, table=True):
    """A mentee's membership in a program. Created once, never updated."""

    __tablename__ = "mentorship_enrollments"
    __table_args__ = (
        UniqueConstraint("program_id", "mentee_id", name="uq_enrollment_program_mentee"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    program_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("mentorship_programs.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    mentee_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )

    def __repr__(self) -> str:
        return f"<Enrollment(id={self.id}, program_id={self.program_id}, mentee_id={self.mentee_id})>"
