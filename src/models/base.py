"""Base model classes with common fields."""

from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    """Timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


class CreatedAtMixin(SQLModel):
    """Creation timestamp for rows that are written once."""

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        nullable=False,
        index=True
    )


class TimestampMixin(CreatedAtMixin):
    """Creation and update timestamps."""

    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    def touch(self) -> None:
        """Mark the row as updated now."""
        self.updated_at = utc_now()


class BaseModel(TimestampMixin):
    """Base class for all table models."""
    pass


class ImmutableModel(CreatedAtMixin):
    """Base class for append-only table models."""
    pass
