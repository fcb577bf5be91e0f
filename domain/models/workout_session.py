"""
WorkoutSession aggregate and its lifecycle status.

A session is one scheduled/executed circuit workout for a group. Its status
moves Pending -> Active -> Completed, with Cancelled reachable from Pending or
Active. Status and the started/ended timestamps are owned by the lifecycle
use case; nothing else writes them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime to UTC.

    Naive datetimes carry no zone information and are treated as UTC.
    Aware datetimes are converted.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class WorkoutSessionStatus(str, Enum):
    """Lifecycle states of a workout session."""

    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        """Human-readable name used in error messages ("Completed")."""
        return self.value.capitalize()

    @property
    def is_terminal(self) -> bool:
        return self in (WorkoutSessionStatus.COMPLETED, WorkoutSessionStatus.CANCELLED)


class WorkoutSession(BaseModel):
    """
    A scheduled workout session for a group.

    Examples:
        >>> session = WorkoutSession(
        ...     id="s1",
        ...     group_id="g1",
        ...     creator_id="u1",
        ...     session_date=datetime(2026, 1, 5, 18, 0),
        ...     created_at=datetime(2026, 1, 1, 9, 0),
        ... )
        >>> session.status
        <WorkoutSessionStatus.PENDING: 'pending'>
        >>> session.session_date.tzinfo
        datetime.timezone.utc
    """

    id: Optional[str] = Field(default=None, description="None for new, unsaved sessions")
    group_id: str
    creator_id: str
    session_date: datetime
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    status: WorkoutSessionStatus = WorkoutSessionStatus.PENDING
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("session_date", "started_at", "ended_at", "created_at")
    @classmethod
    def normalize_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Store every timestamp in UTC."""
        return ensure_utc(v)

    @property
    def was_started(self) -> bool:
        return self.started_at is not None
