"""Base repository class with common CRUD operations."""

from typing import Any, Generic, TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Session

from core.db import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.

    Usage:
        class IssueRepository(BaseRepository[Issue]):
            model = Issue

        repo = IssueRepository(session)
        issue = repo.get_by_id(1)
    """

    model: type[T]

    def __init__(self, session: Session):
        self.session = session

    def _column(self, key: str) -> Any:
        """Resolve a mapped column attribute, rejecting unknown names."""
        if key not in self.model.__table__.columns:
            raise ValueError(f"Unknown filter key: {key!r}")
        return getattr(self.model, key)

    def _conditions(self, filters: dict[str, Any]) -> list:
        return [self._column(key) == value for key, value in filters.items()]

    def get_by_id(self, id: int) -> T | None:
        """Get a single record by ID."""
        return self.session.get(self.model, id)

    def find(self, **filters) -> list[T]:
        """Get all records whose columns equal every given value, in id order."""
        return (
            self.session.query(self.model)
            .filter(*self._conditions(filters))
            .order_by(self.model.id)  # type: ignore[attr-defined]
            .all()
        )

    def create(self, **kwargs) -> T:
        """Create a new record."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        self.session.flush()
        return instance

    def update_by_id(self, id: int, values: dict[str, Any]) -> int:
        """Update a record in a single statement. Returns the number of rows changed."""
        for key in values:
            self._column(key)
        result = (
            self.session.query(self.model)
            .filter(self.model.id == id)  # type: ignore[attr-defined]
            .update(values, synchronize_session=False)  # type: ignore[arg-type]
        )
        self.session.flush()
        return result

    def delete_by_id(self, id: int) -> int:
        """Delete a record in a single statement. Returns the number of rows removed."""
        result = (
            self.session.query(self.model)
            .filter(self.model.id == id)  # type: ignore[attr-defined]
            .delete(synchronize_session=False)
        )
        self.session.flush()
        return result

    def count(self, **filters) -> int:
        """Get count of records, optionally filtered."""
        query = self.session.query(func.count(self.model.id))  # type: ignore[attr-defined]
        query = query.filter(*self._conditions(filters))
        return query.scalar() or 0

    def exists(self, id: int) -> bool:
        """Check if a record exists."""
        result = self.session.query(
            self.session.query(self.model).filter(self.model.id == id).exists()  # type: ignore[attr-defined]
        ).scalar()
        return bool(result) if result is not None else False
