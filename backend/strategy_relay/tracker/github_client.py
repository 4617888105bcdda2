"""
PURPOSE: GitHub Issues client for the Strategic Update Relay.

Creates one issue per call on the configured repository via the GitHub REST v3
API. Configuration is injected at construction so tests and alternative
deployments can supply their own Settings and httpx transport.

CALLED BY:
    - strategy_relay/webhook/processor.py (via StrategicUpdateProcessor)
    - strategy_relay/api/routes_webhook.py (dependency factory get_issue_client)
"""

from typing import Any, Dict, Optional

import httpx

from strategy_relay.config.settings import Settings, settings
from strategy_relay.core.errors import TrackerConfigurationError, UpstreamFailure
from strategy_relay.schemas.issue import IssuePayload
from strategy_relay.utils.logger import get_logger

logger = get_logger(__name__)

GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"


class GitHubIssueClient:
    """
    PURPOSE: Thin async client for POST /repos/{owner}/{repo}/issues.

    No retries or batching: every create_issue() call is exactly one request,
    and any non-2xx answer is raised as UpstreamFailure.

    Attributes:
        _config: Settings holding the token, API base URL and repository identity.
        _transport: Optional httpx transport (MockTransport in tests).
    """

    def __init__(
        self,
        config: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._transport = transport

    @property
    def issues_url(self) -> str:
        """Issue-creation endpoint for the configured repository."""
        base_url = self._config.GITHUB_API_URL.rstrip("/")
        return (
            f"{base_url}/repos/{self._config.GITHUB_REPO_OWNER}"
            f"/{self._config.GITHUB_REPO_NAME}/issues"
        )

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"token {self._config.GITHUB_TOKEN}",
            "Accept": GITHUB_ACCEPT_HEADER,
            "Content-Type": "application/json",
        }

    async def create_issue(self, issue: IssuePayload) -> Dict[str, Any]:
        """
        PURPOSE: Create a single issue on the tracker.

        Configuration is checked here, at call time, rather than at startup.

        CALLED BY: StrategicUpdateProcessor._create_issues()

        Args:
            issue: Title and body of the issue to create.

        Returns:
            dict: Decoded JSON issue document returned by GitHub.

        Raises:
            TrackerConfigurationError: Token or repository settings are empty.
            UpstreamFailure: GitHub answered with a non-2xx status.
            httpx.HTTPError: Transport-level failure (connection, timeout).
        """
        missing = self._config.get_missing_tracker_settings()
        if missing:
            logger.error("tracker_not_configured", missing=missing, title=issue.title)
            raise TrackerConfigurationError(missing)

        async with httpx.AsyncClient(
            timeout=self._config.TRACKER_TIMEOUT_SECONDS,
            transport=self._transport,
        ) as client:
            response = await client.post(
                self.issues_url,
                headers=self._build_headers(),
                json=issue.model_dump(),
            )

        if not response.is_success:
            error_text = response.text
            logger.error(
                "tracker_issue_failed",
                title=issue.title,
                status_code=response.status_code,
                error=error_text,
            )
            raise UpstreamFailure(response.status_code, error_text)

        created = response.json()
        logger.info(
            "tracker_issue_created",
            title=issue.title,
            number=created.get("number") if isinstance(created, dict) else None,
            url=created.get("html_url") if isinstance(created, dict) else None,
        )
        return created


def get_issue_client() -> GitHubIssueClient:
    """
    PURPOSE: Build a GitHubIssueClient bound to the process-wide settings.

    Used as a FastAPI dependency so tests can override it with a client that
    carries test settings and a mock transport.

    Returns:
        GitHubIssueClient: Client configured from environment settings.
    """
    return GitHubIssueClient(settings)
