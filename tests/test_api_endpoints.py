"""
API endpoint tests for the send-guard service.

These tests use FastAPI's TestClient to exercise the scan endpoint against
the real scanner and verify the error envelope always carries a Block
verdict.
"""

from urllib.parse import unquote

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.services.scan_service import ScanService, get_scan_service
from send_guard.config.guard_config import GuardConfig
from send_guard.errors import PipelineFailure
from tests.test_infrastructure import EXTERNAL_LINK_HTML, PHI_BODY, TEST_INTERNAL_DOMAIN

client = TestClient(app)

TEST_CONFIG = GuardConfig(
    internal_domain=TEST_INTERNAL_DOMAIN,
    dialog_base_url="https://addin.example.org/guard",
)


class FailingScanner:
    async def scan(self, source):
        raise PipelineFailure("scanner crashed")


@pytest.fixture
def scan_service():
    app.dependency_overrides[get_scan_service] = lambda: ScanService(TEST_CONFIG)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def failing_scan_service():
    app.dependency_overrides[get_scan_service] = lambda: ScanService(TEST_CONFIG, FailingScanner())
    yield
    app.dependency_overrides.clear()


def test_health_check():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_clean_message_allowed_immediately(scan_service):
    response = client.post("/scan", json={"subject": "Q3 planning", "body_text": "see attached"})

    assert response.status_code == 200
    data = response.json()
    assert data["allow_immediately"] is True
    assert data["findings"] == []
    assert data["dialog"] is None


def test_empty_request_is_clean(scan_service):
    response = client.post("/scan", json={})

    assert response.status_code == 200
    assert response.json()["allow_immediately"] is True


def test_findings_and_dialog_returned(scan_service):
    response = client.post("/scan", json={
        "subject": "Update",
        "body_text": PHI_BODY,
        "body_html": EXTERNAL_LINK_HTML,
        "attachments": [{"name": "scan.zip", "id": "att-1"}],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["allow_immediately"] is False
    assert [finding["kind"] for finding in data["findings"]] == [
        "sensitive_pattern",
        "external_links",
        "attachment_count",
        "risky_attachments",
    ]
    assert data["findings"][1]["links"] == ["https://external.example.com/doc"]
    assert data["findings"][2]["count"] == 1
    assert data["findings"][3]["names"] == ["scan.zip"]

    dialog = data["dialog"]
    assert dialog["height"] == 50 and dialog["width"] == 50
    assert dialog["display_in_iframe"] is True
    assert dialog["url"].startswith("https://addin.example.org/guard/modal.html?w=")
    assert unquote(dialog["url"].split("?w=", 1)[1]) == data["warning_message"]


def test_invalid_payload_returns_validation_error(scan_service):
    response = client.post("/scan", json={"attachments": "scan.zip"})

    assert response.status_code == 422
    data = response.json()
    assert data["error_code"] == "VALIDATION_ERROR"
    assert data["verdict"] == "block"
    assert data["validation_errors"]


def test_pipeline_failure_blocks(failing_scan_service):
    response = client.post("/scan", json={"body_text": PHI_BODY})

    assert response.status_code == 500
    data = response.json()
    assert data["status"] == "error"
    assert data["verdict"] == "block"
    assert data["error_code"] == "PIPELINE_FAILURE"
    assert PHI_BODY not in data["message"]


def test_unknown_route_uses_error_envelope():
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json()["error_code"] == "HTTP_404"


def test_null_channels_are_scanned_as_empty(scan_service):
    response = client.post("/scan", json={
        "subject": "Q3 planning",
        "body_text": "see attached",
        "body_html": None,
        "attachments": None,
    })

    assert response.status_code == 200
    assert response.json()["allow_immediately"] is True


def test_null_channel_does_not_hide_findings(scan_service):
    response = client.post("/scan", json={
        "subject": None,
        "body_text": PHI_BODY,
        "body_html": None,
        "attachments": [{"name": None, "id": "AAMk.png"}],
    })

    assert response.status_code == 200
    data = response.json()
    assert [finding["kind"] for finding in data["findings"]] == [
        "sensitive_pattern",
        "attachment_count",
        "risky_attachments",
    ]
    assert data["findings"][2]["names"] == ["AAMk.png"]
