"""
Issue SQLAlchemy model.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes even for timezone=True columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Issue(Base):
    """
    A tracked work item belonging to a project.

    The project is a free-text name taken from the request path; it only
    partitions list queries and carries no relation of its own.
    """
    __tablename__ = "issues"
    # Never hand out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    issue_title: Mapped[str] = mapped_column(String(255), nullable=False)
    issue_text: Mapped[str] = mapped_column(Text, nullable=False)
    created_by: Mapped[str] = mapped_column(String(255), nullable=False)
    assigned_to: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    status_text: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    open: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    projectname: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    created_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the issue into its API representation.

        The primary key is exposed as ``_id`` and timestamps as ISO-8601
        strings in UTC.
        """
        created_on = _as_utc(self.created_on)
        updated_on = _as_utc(self.updated_on)
        return {
            "_id": self.id,
            "issue_title": self.issue_title,
            "issue_text": self.issue_text,
            "created_by": self.created_by,
            "assigned_to": self.assigned_to,
            "status_text": self.status_text,
            "open": self.open,
            "projectname": self.projectname,
            "created_on": created_on.isoformat() if created_on else None,
            "updated_on": updated_on.isoformat() if updated_on else None,
        }

    def __repr__(self) -> str:
        return f"<Issue id={self.id} projectname={self.projectname!r}>"
