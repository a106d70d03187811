"""Account and profile models."""

from typing import Optional
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import Enum as SQLEnum, ForeignKey, Integer

from .base import BaseModel
from .enums import UserRole, UserStatus, ProfileStatus, enum_values


class User(BaseModel, SQLModel, table=True):
    """Account of any platform user (admin, alumni, student, recruiter)."""

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(max_length=255, unique=True, nullable=False, index=True)
    role: UserRole = Field(
        sa_column=Column(SQLEnum(UserRole, name="userrole", values_callable=enum_values), nullable=False),
        description="Account role"
    )
    status: UserStatus = Field(
        default=UserStatus.ACTIVE,
        sa_column=Column(SQLEnum(UserStatus, name="userstatus", values_callable=enum_values), nullable=False, default=UserStatus.ACTIVE),
        description="Account status: active, inactive, or suspended"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role.value})>"


class Profile(BaseModel, SQLModel, table=True):
    """Alumni or student profile owned by exactly one account."""

    __tablename__ = "profiles"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("users.id", ondelete="CASCADE"),
            unique=True,
            nullable=False,
            index=True,
        )
    )
    name: str = Field(max_length=255, nullable=False)
    email: str = Field(max_length=255, nullable=False, index=True)
    department: Optional[str] = Field(default=None, max_length=255)
    graduation_year: Optional[int] = Field(default=None)
    company: Optional[str] = Field(default=None, max_length=255)
    designation: Optional[str] = Field(default=None, max_length=255)
    status: ProfileStatus = Field(
        default=ProfileStatus.PENDING,
        sa_column=Column(SQLEnum(ProfileStatus, name="profilestatus", values_callable=enum_values), nullable=False, default=ProfileStatus.PENDING),
        description="Approval status: pending, approved, or rejected"
    )

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, user_id={self.user_id}, name={self.name})>"
