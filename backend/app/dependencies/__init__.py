"""
FastAPI dependency injection module.

Provides centralized dependencies for:
- Repositories
- Request payload parsing
"""

import json
from typing import Any
from urllib.parse import parse_qsl

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from core.db import get_db
from core.repositories import IssueRepository

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


# =============================================================================
# Repository Dependencies
# =============================================================================


def get_issue_repository(db: Session = Depends(get_db)) -> IssueRepository:
    """Get IssueRepository instance."""
    return IssueRepository(db)


# =============================================================================
# Request Payload
# =============================================================================


async def get_request_payload(request: Request) -> dict[str, Any]:
    """
    Read the request body as a flat dict.

    Accepts JSON objects and urlencoded forms. An empty, malformed or
    non-object body yields an empty dict so handlers can answer with their
    own error contract.
    """
    body = await request.body()
    if not body:
        return {}

    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith(FORM_CONTENT_TYPE):
            return dict(parse_qsl(body.decode("utf-8"), keep_blank_values=True))
        payload = json.loads(body)
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


__all__ = [
    "get_issue_repository",
    "get_request_payload",
]
