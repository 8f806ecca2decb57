"""
Issue Tracker Core Library.

Database management, models, repositories, validation and logging shared
by the HTTP backend and the migrations.

Usage:
    # Database
    from core.db import DatabaseManager, get_db
    from core.models import Issue
    from core.repositories import IssueRepository

    # Config
    from core.config import get_settings, Settings

    # Logging
    from core.logging import get_logger, configure_logging
"""

__version__ = "1.0.0"
