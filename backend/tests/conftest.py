"""
PURPOSE: Pytest fixtures for Strategic Update Relay tests.

Provides shared test data and mock objects including:
- Test configuration settings
- A recording mock transport standing in for the GitHub Issues API
- A GitHubIssueClient wired to that transport
- A FastAPI TestClient with the tracker dependency overridden
"""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient


class TrackerRecorder:
    """
    PURPOSE: Fake GitHub Issues API that records every issue-creation request.

    Answers 201 with an issue document by default. Set fail_on_call to the
    1-based call number that should fail with fail_status / fail_body.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.fail_on_call: Optional[int] = None
        self.fail_status: int = 422
        self.fail_body: str = '{"message":"Validation Failed"}'

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        number = len(self.requests)
        if self.fail_on_call == number:
            return httpx.Response(self.fail_status, text=self.fail_body)
        return httpx.Response(
            201,
            json={
                "number": number,
                "html_url": f"https://github.com/test-owner/test-repo/issues/{number}",
            },
        )

    @property
    def payloads(self) -> List[Dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]

    @property
    def titles(self) -> List[str]:
        return [payload["title"] for payload in self.payloads]


@pytest.fixture
def test_settings():
    """
    PURPOSE: Settings override with test values.

    Returns:
        Settings: Configuration object pointing at a fake repository.
    """
    from strategy_relay.config.settings import Settings

    return Settings(
        GITHUB_TOKEN="test-token",
        GITHUB_API_URL="https://api.github.test",
        GITHUB_REPO_OWNER="test-owner",
        GITHUB_REPO_NAME="test-repo",
        TRACKER_TIMEOUT_SECONDS=5.0,
        APP_ENV="test",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def tracker():
    """Recording fake of the GitHub Issues API."""
    return TrackerRecorder()


@pytest.fixture
def issue_client(test_settings, tracker):
    """GitHubIssueClient using test settings and the recording transport."""
    from strategy_relay.tracker.github_client import GitHubIssueClient

    return GitHubIssueClient(test_settings, transport=httpx.MockTransport(tracker.handler))


@pytest.fixture
def client(issue_client):
    """
    PURPOSE: TestClient for the relay app with the tracker dependency overridden.

    Overrides are cleared after the test so other tests see the real factory.
    """
    from strategy_relay.main import app
    from strategy_relay.tracker.github_client import get_issue_client

    app.dependency_overrides[get_issue_client] = lambda: issue_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def long_insights():
    """Insights string of 150 characters (above the brief threshold)."""
    return ("Portfolio shift toward AI tooling. " * 5)[:150]


@pytest.fixture
def full_complex_payload(long_insights):
    """complex-update payload with dashboard, insights, projects and two emails."""
    return {
        "action": "complex-update",
        "conversationType": "portfolio-review",
        "projectUpdates": {
            "Atlas": {"progress": 75, "context": "Beta shipped"},
            "Beacon": {"context": "Paused for hiring"},
        },
        "strategicInsights": long_insights,
        "dashboardData": {
            "projects": {"Atlas": "75%", "Beacon": "paused"},
            "currentFocus": "Atlas launch",
            "context": "Quarterly planning",
        },
        "emailRequests": [
            {"subject": "Investor update", "recipient": "board"},
            {"content": "Hiring plan"},
        ],
    }
