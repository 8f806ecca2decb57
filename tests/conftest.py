"""
Pytest fixtures for Issue Tracker tests.

Each test gets a fresh in-memory SQLite database.
"""

import pytest

from core.db import DatabaseManager
from core.repositories import IssueRepository


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh, initialized test database for each test."""
    database = DatabaseManager()
    database.initialize("sqlite://")
    database.create_all_tables()

    yield database

    database.reset()


@pytest.fixture
def test_session(test_db):
    """Get a test session from the test database."""
    session = test_db.SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture
def issue_repo(test_session):
    return IssueRepository(test_session)


@pytest.fixture
def sample_issue_fields():
    """Fields of a complete issue as submitted by a client."""
    return {
        "issue_title": "Fix login redirect",
        "issue_text": "Users land on a blank page after signing in.",
        "created_by": "Alice",
        "assigned_to": "Bob",
        "status_text": "In QA",
    }
