"""
Tests for the Alembic migrations.
"""

import os

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

BACKEND_ROOT = os.path.join(os.path.dirname(os.path.dirname(__file__)), "backend")


def _alembic_config(database_url: str) -> Config:
    config = Config(os.path.join(BACKEND_ROOT, "alembic.ini"))
    config.set_main_option("sqlalchemy.url", database_url)
    return config


def test_upgrade_creates_issue_table_matching_model(tmp_path):
    from core.models import Issue

    database_url = f"sqlite:///{tmp_path / 'migrations.db'}"
    command.upgrade(_alembic_config(database_url), "head")

    engine = create_engine(database_url)
    try:
        inspector = inspect(engine)
        columns = {column["name"] for column in inspector.get_columns("issues")}
        indexes = {index["name"] for index in inspector.get_indexes("issues")}
    finally:
        engine.dispose()

    assert columns == set(Issue.__table__.columns.keys())
    assert "ix_issues_projectname" in indexes


def test_downgrade_drops_issue_table(tmp_path):
    database_url = f"sqlite:///{tmp_path / 'migrations.db'}"
    config = _alembic_config(database_url)
    command.upgrade(config, "head")

    command.downgrade(config, "base")

    engine = create_engine(database_url)
    try:
        assert "issues" not in inspect(engine).get_table_names()
    finally:
        engine.dispose()
