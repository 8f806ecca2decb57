"""
Issue endpoints: one resource per project, /issues/{projectname}.

Every outcome is answered with HTTP 200; failures carry an ``error`` key
in the body instead of an error status.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query

from core.logging import LogContext
from core.repositories import IssueRepository

from ..dependencies import get_issue_repository, get_request_payload
from ..services import issue_service

router = APIRouter(prefix="/issues", tags=["issues"])


@router.get("/{projectname}")
def list_issues(
    projectname: str,
    issue_id: str | None = Query(default=None, alias="_id"),
    issue_title: str | None = Query(default=None),
    issue_text: str | None = Query(default=None),
    created_by: str | None = Query(default=None),
    assigned_to: str | None = Query(default=None),
    status_text: str | None = Query(default=None),
    open_: str | None = Query(default=None, alias="open"),
    repo: IssueRepository = Depends(get_issue_repository),
):
    """List the project's issues, filtered by exact match on any given field."""
    filters = {
        "_id": issue_id,
        "issue_title": issue_title,
        "issue_text": issue_text,
        "created_by": created_by,
        "assigned_to": assigned_to,
        "status_text": status_text,
        "open": open_,
    }
    with LogContext(projectname=projectname):
        return issue_service.list_issues(repo, projectname, filters)


@router.post("/{projectname}")
def create_issue(
    projectname: str,
    payload: dict[str, Any] = Depends(get_request_payload),
    repo: IssueRepository = Depends(get_issue_repository),
):
    """Create an issue from issue_title, issue_text, created_by and optional fields."""
    with LogContext(projectname=projectname):
        return issue_service.create_issue(repo, projectname, payload)


@router.put("/{projectname}")
def update_issue(
    projectname: str,
    payload: dict[str, Any] = Depends(get_request_payload),
    repo: IssueRepository = Depends(get_issue_repository),
):
    """Update the fields sent alongside ``_id``."""
    with LogContext(projectname=projectname):
        return issue_service.update_issue(repo, payload)


@router.delete("/{projectname}")
def delete_issue(
    projectname: str,
    payload: dict[str, Any] = Depends(get_request_payload),
    repo: IssueRepository = Depends(get_issue_repository),
):
    """Delete the issue named by ``_id``."""
    with LogContext(projectname=projectname):
        return issue_service.delete_issue(repo, payload)
