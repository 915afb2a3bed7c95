# taskhub/adapters/persistence/models.py

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from taskhub.core.domain.models import Task, User
from taskhub.core.domain.value_objects import Email, TaskId, UserId


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class UserRecord(Base):
    """
    Row shape of the ``users`` table.

    ``email`` carries a unique constraint whose name contains "email", so the
    error mapper can tell an email clash from an id clash.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    @classmethod
    def from_domain(cls, user: User) -> UserRecord:
        return cls(id=user.id.value, name=user.name, email=user.email.value)

    def to_domain(self) -> User:
        # Trusted source: rows were validated before they were written.
        return User.reconstitute(
            UserId.from_trusted(self.id),
            self.name,
            Email.from_trusted(self.email),
            self.updated_at,
        )

    def __repr__(self) -> str:
        return f"<UserRecord id={self.id!r} email={self.email!r}>"


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


class TaskRecord(Base):
    """Row shape of the ``tasks`` table; deleting a user deletes their tasks."""

    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    @classmethod
    def from_domain(cls, task: Task) -> TaskRecord:
        return cls(
            id=task.id.value,
            user_id=task.user_id.value,
            title=task.title,
            description=task.description,
            completed=task.is_completed(),
        )

    def to_domain(self) -> Task:
        return Task.reconstitute(
            TaskId.from_trusted(self.id),
            UserId.from_trusted(self.user_id),
            self.title,
            self.description,
            self.completed,
            self.updated_at,
        )

    def __repr__(self) -> str:
        return f"<TaskRecord id={self.id!r} user_id={self.user_id!r} completed={self.completed!r}>"
