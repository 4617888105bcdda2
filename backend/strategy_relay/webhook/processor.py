"""
PURPOSE: Strategic update processor for the relay webhook.

Dispatches a validated UpdateRequest to one of four processing paths, formats
the resulting issues and creates them on the tracker one at a time, in a fixed
order. The first failing call aborts the rest of the invocation.

CALLED BY:
    - strategy_relay/api/routes_webhook.py (POST /api/watson-bridge)
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from strategy_relay.schemas.issue import IssuePayload
from strategy_relay.schemas.update import (
    ComplexUpdateRequest,
    DashboardData,
    DashboardUpdateRequest,
    EmailRequest,
    ProjectUpdate,
    SendEmailRequest,
    StrategicAnalysisRequest,
    UpdateRequest,
)
from strategy_relay.tracker.github_client import GitHubIssueClient
from strategy_relay.utils.logger import get_logger
from strategy_relay.webhook.formatting import (
    build_dashboard_issue,
    build_email_issue,
    build_strategic_analysis_issues,
)

logger = get_logger(__name__)


class StrategicUpdateProcessor:
    """
    PURPOSE: Turns strategic update requests into tracker issues.

    Holds no state between invocations; each process() call is independent.

    Attributes:
        _client: Tracker client used to create every issue.
    """

    def __init__(self, client: GitHubIssueClient) -> None:
        self._client = client

    # ════════════════════════════════════════════════════════════════
    # Public API
    # ════════════════════════════════════════════════════════════════

    async def process(self, update: UpdateRequest) -> List[Dict[str, Any]]:
        """
        PURPOSE: Run the processing path selected by the request's action.

        CALLED BY: POST /api/watson-bridge route handler

        Args:
            update: Validated request variant.

        Returns:
            list: Issue documents returned by the tracker, in creation order.

        Raises:
            TypeError: update is not one of the four request variants.
        """
        if isinstance(update, StrategicAnalysisRequest):
            return await self.process_strategic_analysis(
                insights=update.strategic_insights,
                projects=update.project_updates,
                research=update.research_needs,
            )
        if isinstance(update, DashboardUpdateRequest):
            return await self.update_dashboard_with_context(update.dashboard_data)
        if isinstance(update, SendEmailRequest):
            return await self.trigger_strategic_email(update.email_requests)
        if isinstance(update, ComplexUpdateRequest):
            return await self.process_complex_update(update)

        raise TypeError(f"Unsupported update request: {type(update).__name__}")

    async def process_strategic_analysis(
        self,
        insights: Optional[str],
        projects: Optional[Mapping[str, ProjectUpdate]],
        research: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """File the strategic analysis issue, and the insights brief when insights are long."""
        issues = build_strategic_analysis_issues(insights, projects, research)
        return await self._create_issues("strategic-analysis", issues)

    async def update_dashboard_with_context(self, dashboard_data: DashboardData) -> List[Dict[str, Any]]:
        """File one contextual dashboard issue."""
        return await self._create_issues("dashboard-update", [build_dashboard_issue(dashboard_data)])

    async def trigger_strategic_email(self, email_requests: Iterable[EmailRequest]) -> List[Dict[str, Any]]:
        """File one [EMAIL] issue per email request, in request order."""
        issues = [build_email_issue(email) for email in email_requests]
        return await self._create_issues("send-email", issues)

    async def process_complex_update(self, update: ComplexUpdateRequest) -> List[Dict[str, Any]]:
        """
        PURPOSE: Run dashboard, strategic analysis and email paths for a multi-part update.

        Order is fixed: dashboard (when dashboardData is present), strategic
        analysis (when strategicInsights is non-empty, reusing projectUpdates
        and without research needs), then emails (when emailRequests is
        non-empty).

        Args:
            update: Validated complex-update request.

        Returns:
            list: Issue documents from all three paths, in creation order.
        """
        created: List[Dict[str, Any]] = []

        if update.dashboard_data is not None:
            created.extend(await self.update_dashboard_with_context(update.dashboard_data))

        if update.strategic_insights:
            created.extend(
                await self.process_strategic_analysis(
                    insights=update.strategic_insights,
                    projects=update.project_updates,
                )
            )

        if update.email_requests:
            created.extend(await self.trigger_strategic_email(update.email_requests))

        return created

    # ════════════════════════════════════════════════════════════════
    # Internal Helpers
    # ════════════════════════════════════════════════════════════════

    async def _create_issues(self, path: str, issues: List[IssuePayload]) -> List[Dict[str, Any]]:
        """
        PURPOSE: Create issues strictly one after another.

        Each call completes before the next starts; an exception from the
        client propagates immediately and the remaining issues are not sent.
        """
        created = []
        for position, issue in enumerate(issues, start=1):
            logger.debug(
                "tracker_issue_dispatching",
                path=path,
                title=issue.title,
                position=position,
                total=len(issues),
            )
            created.append(await self._client.create_issue(issue))
        return created
