"""Mentorship program schemas for request/response validation."""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, StrictInt
from datetime import datetime


class ProgramCreate(BaseModel):
    """Schema for creating a mentorship program.

    Fields are optional at the schema level so that missing values are
    reported by the program service with a domain validation error.
    """
    mentor_id: Optional[int] = Field(None, description="Mentor account id or profile id")
    subject: Optional[str] = Field(None, max_length=255, description="Program subject")
    description: Optional[str] = Field(None, description="Program description (HTML allowed)")
    community_link: Optional[str] = Field(None, max_length=500, description="External community link")
    capacity: Optional[StrictInt] = Field(None, description="Maximum number of mentees")


class ProgramResponse(BaseModel):
    """Schema for Program response."""
    id: int
    mentor_id: int
    subject: str
    description: Optional[str] = None
    community_link: str
    capacity: int
    is_active: bool
    joined_count: int = 0
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProgramListItem(ProgramResponse):
    """Program annotated with live count and the viewer's membership."""
    joined_by_viewer: bool = False


class ProgramListResponse(BaseModel):
    """Program listing, newest first."""
    items: List[ProgramListItem] = Field(..., description="List of programs")
    total: int = Field(..., description="Total number of programs")


class MentorSummary(BaseModel):
    """Mentor profile summary for oversight views."""
    id: int
    name: str
    email: str
    department: Optional[str] = None
    designation: Optional[str] = None


class AdminProgramItem(ProgramResponse):
    """Program with its mentor summary for admin oversight."""
    mentor: MentorSummary


class AdminProgramListResponse(BaseModel):
    """Admin oversight listing."""
    items: List[AdminProgramItem] = Field(..., description="List of programs")
    total: int = Field(..., description="Total number of programs")


class EnrollmentCreate(BaseModel):
    """Schema for joining a program."""
    mentee_id: Optional[int] = Field(None, description="Mentee account id or profile id")


class EnrollmentResponse(BaseModel):
    """Schema for Enrollment response."""
    id: int
    program_id: int
    mentee_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
