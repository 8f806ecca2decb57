"""
Backend services for the Issue Tracker.
"""

from . import issue_service

__all__ = [
    "issue_service",
]
