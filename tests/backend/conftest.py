from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from backend.app.main import create_app


@pytest.fixture
def test_app_client(test_db) -> Iterator[TestClient]:
    app = create_app(database=test_db)

    with TestClient(app) as client:
        yield client


@pytest.fixture
def create_issue(test_app_client):
    """Create an issue through the API and return the response body."""

    def _create(project: str = "apitest", **fields) -> dict:
        payload = {
            "issue_title": "Title",
            "issue_text": "Text",
            "created_by": "Alice",
        }
        payload.update(fields)
        resp = test_app_client.post(f"/api/issues/{project}", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _create
