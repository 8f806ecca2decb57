"""
SQLAlchemy models for the Issue Tracker.

Usage:
    from core.models import Issue
"""

from .base import Base
from .issue import Issue

__all__ = [
    "Base",
    "Issue",
]
