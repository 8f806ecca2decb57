"""
Issue repository: CRUD over the issues table.
"""

import re
from typing import Any

from core.models import Issue
from core.models.issue import utcnow

from .base import BaseRepository

# Columns a client may change after creation
UPDATABLE_FIELDS = frozenset(
    {"issue_title", "issue_text", "created_by", "assigned_to", "status_text", "open"}
)

ISSUE_DEFAULTS = {"assigned_to": "", "status_text": "", "open": True}

# SQLite INTEGER range; anything wider cannot be bound as a parameter
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1
_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_issue_id(value: Any) -> int | None:
    """
    Coerce an external identifier to the integer primary key.

    Returns None for anything that cannot name a row (``"f00b4r"``, ``"1_0"``,
    ``1.5``, booleans, ``None``, values outside a signed 64-bit integer).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not _ID_PATTERN.fullmatch(text):
            return None
        value = int(text)
    if isinstance(value, int) and ID_MIN <= value <= ID_MAX:
        return value
    return None


class IssueRepository(BaseRepository[Issue]):
    """
    Repository for Issue rows.

    Owns identity assignment and timestamp maintenance. Updates and deletes
    are single statements keyed on the primary key, so concurrent writers
    to the same row are serialized by the database.
    """

    model = Issue

    def create(self, **fields) -> Issue:  # type: ignore[override]
        """
        Insert a new issue and return it with its id and timestamps populated.

        Omitted optional fields take their defaults. No validation happens here.
        """
        now = utcnow()
        values = {**ISSUE_DEFAULTS, **fields, "created_on": now, "updated_on": now}
        return super().create(**values)

    def list(self, filters: dict[str, Any] | None = None) -> list[Issue]:
        """
        Get the issues matching every key/value pair in ``filters``.

        ``_id`` is accepted as an alias for the primary key; a value that is
        not a valid identifier matches nothing. An empty filter returns every row.
        """
        conditions = dict(filters or {})
        if "_id" in conditions:
            issue_id = parse_issue_id(conditions.pop("_id"))
            if issue_id is None:
                return []
            conditions["id"] = issue_id
        return self.find(**conditions)

    def update(self, issue_id: Any, fields: dict[str, Any]) -> bool:
        """
        Merge ``fields`` into the issue and refresh ``updated_on``.

        Returns:
            True if exactly one row was modified, False when the identifier is
            malformed or matches nothing.

        Raises:
            ValueError: If ``fields`` names a column that cannot be updated.
        """
        key = parse_issue_id(issue_id)
        if key is None:
            return False

        rejected = sorted(set(fields) - UPDATABLE_FIELDS)
        if rejected:
            raise ValueError(f"Fields cannot be updated: {', '.join(rejected)}")

        values = {**fields, "updated_on": utcnow()}
        return self.update_by_id(key, values) == 1

    def delete(self, issue_id: Any) -> bool:
        """Remove the issue. Returns whether a row was actually removed."""
        key = parse_issue_id(issue_id)
        if key is None:
            return False
        return self.delete_by_id(key) == 1
