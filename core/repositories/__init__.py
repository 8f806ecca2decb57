"""
Repository pattern implementations for data access.

Repositories wrap a SQLAlchemy session and keep query construction out of
the HTTP layer. They flush but never commit; the session owner commits.

Usage:
    from core.repositories import IssueRepository

    with database.session() as session:
        repo = IssueRepository(session)
        issues = repo.list({"projectname": "apitest"})
"""

from .base import BaseRepository
from .issue_repository import IssueRepository, parse_issue_id

__all__ = [
    "BaseRepository",
    "IssueRepository",
    "parse_issue_id",
]
