"""
Issue service - bridges FastAPI endpoints with the issue repository.

Every outcome, including store failures, is returned as a JSON-ready value;
nothing here raises to the HTTP layer.
"""

from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from core.logging import get_logger
from core.repositories import IssueRepository
from core.validation import parse_bool, validate_new_issue

logger = get_logger("api.issue_service")

MISSING_REQUIRED = "required field(s) missing"
MISSING_ID = "missing _id"
NO_UPDATE_FIELDS = "no update field(s) sent"
COULD_NOT_UPDATE = "could not update"
COULD_NOT_DELETE = "could not delete"
COULD_NOT_CREATE = "could not create"
COULD_NOT_LIST = "could not retrieve issues"
UPDATED = "successfully updated"
DELETED = "successfully deleted"


def list_issues(
    repo: IssueRepository, projectname: str, filters: dict[str, Any]
) -> list[dict] | dict:
    """
    List the issues of a project matching the given equality filters.

    Args:
        repo: Issue repository bound to the request session.
        projectname: Project scope from the request path.
        filters: Query filters; ``open`` is still in its string form.

    Returns:
        List of issue dicts, or an error body if the store fails.
    """
    conditions = {key: value for key, value in filters.items() if value is not None}
    if "open" in conditions:
        conditions["open"] = parse_bool(conditions["open"])
    conditions["projectname"] = projectname

    try:
        issues = repo.list(conditions)
    except SQLAlchemyError:
        repo.session.rollback()
        logger.exception("issue_list_failed", filters=sorted(conditions))
        return {"error": COULD_NOT_LIST}

    logger.debug("issues_listed", count=len(issues), filters=sorted(conditions))
    return [issue.to_dict() for issue in issues]


def create_issue(repo: IssueRepository, projectname: str, payload: dict[str, Any]) -> dict:
    """Validate and store a new issue, returning it in full."""
    result = validate_new_issue(payload)
    if not result.valid:
        logger.info(
            "issue_validation_failed", missing=result.missing, invalid=result.invalid
        )
        return {"error": MISSING_REQUIRED}

    try:
        issue = repo.create(**result.fields, projectname=projectname)
        repo.session.commit()
    except SQLAlchemyError:
        repo.session.rollback()
        logger.exception("issue_create_failed")
        return {"error": COULD_NOT_CREATE}

    logger.info("issue_created", issue_id=issue.id)
    return issue.to_dict()


def _update_set(payload: dict[str, Any]) -> dict[str, Any]:
    # Blank form fields count as not sent
    return {
        key: value
        for key, value in payload.items()
        if key != "_id" and value is not None and value != ""
    }


def update_issue(repo: IssueRepository, payload: dict[str, Any]) -> dict:
    """Apply a partial update to the issue named by ``payload["_id"]``."""
    issue_id = payload.get("_id")
    if issue_id is None or issue_id == "":
        return {"error": MISSING_ID}

    fields = _update_set(payload)
    if not fields:
        return {"error": NO_UPDATE_FIELDS, "_id": issue_id}

    try:
        if "open" in fields:
            fields["open"] = parse_bool(fields["open"], strict=True)
        updated = repo.update(issue_id, fields)
        if updated:
            repo.session.commit()
    except (SQLAlchemyError, ValueError) as e:
        repo.session.rollback()
        logger.warning(
            "issue_update_failed", issue_id=issue_id, error=str(e), error_type=type(e).__name__
        )
        return {"error": COULD_NOT_UPDATE, "_id": issue_id}

    if not updated:
        logger.info("issue_update_no_match", issue_id=issue_id)
        return {"error": COULD_NOT_UPDATE, "_id": issue_id}

    logger.info("issue_updated", issue_id=issue_id, fields=sorted(fields))
    return {"result": UPDATED, "_id": issue_id}


def delete_issue(repo: IssueRepository, payload: dict[str, Any]) -> dict:
    """Delete the issue named by ``payload["_id"]``."""
    issue_id = payload.get("_id")
    if issue_id is None or issue_id == "":
        return {"error": MISSING_ID}

    try:
        deleted = repo.delete(issue_id)
        if deleted:
            repo.session.commit()
    except SQLAlchemyError as e:
        repo.session.rollback()
        logger.warning(
            "issue_delete_failed", issue_id=issue_id, error=str(e), error_type=type(e).__name__
        )
        return {"error": COULD_NOT_DELETE, "_id": issue_id}

    if not deleted:
        logger.info("issue_delete_no_match", issue_id=issue_id)
        return {"error": COULD_NOT_DELETE, "_id": issue_id}

    logger.info("issue_deleted", issue_id=issue_id)
    return {"result": DELETED, "_id": issue_id}
