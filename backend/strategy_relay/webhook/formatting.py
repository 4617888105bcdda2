"""
PURPOSE: Text formatting for strategic update issues.

Turns project updates, dashboard snapshots, insights and email requests into
IssuePayload units. Every optional field falls back to a fixed literal so no
issue is ever sent with a blank section. Titles, bodies and fallback texts are
part of the relay's visible output and must stay byte-for-byte stable.

CALLED BY:
    - strategy_relay/webhook/processor.py
"""

import json
from typing import Any, List, Mapping, Optional, Union

from strategy_relay.schemas.issue import IssuePayload
from strategy_relay.schemas.update import DashboardData, EmailRequest, ProjectUpdate

# Issue titles
STRATEGIC_ANALYSIS_TITLE = "[DASHBOARD] Strategic Analysis Update"
INSIGHTS_BRIEF_TITLE = "[EMAIL] Strategic Insights Brief"
DASHBOARD_TITLE = "[DASHBOARD] Contextual Update"
EMAIL_TITLE_PREFIX = "[EMAIL] "

# Insights longer than this also produce a brief, truncated to the excerpt length
INSIGHTS_BRIEF_THRESHOLD = 100
INSIGHTS_BRIEF_EXCERPT = 200

# Fallback literals
NO_PROJECT_UPDATES = "No specific project updates provided"
NO_PROGRESS = "No progress specified"
DEFAULT_PROJECT_CONTEXT = "Strategic context from conversation"
GENERAL_DASHBOARD_UPDATE = "General dashboard update from strategic conversation"
DEFAULT_INSIGHTS = "Strategic insights from portfolio discussion"
DEFAULT_RESEARCH = "Research requirements identified during strategic conversation"
DEFAULT_FOCUS = "Strategic portfolio execution"
DEFAULT_DASHBOARD_CONTEXT = "Updates from strategic conversation"
DEFAULT_EMAIL_TYPE = "strategic communication"
DEFAULT_EMAIL_CONTENT = "Strategic communication from portfolio conversation"
DEFAULT_EMAIL_RECIPIENT = "strategic stakeholder"
DEFAULT_EMAIL_FRAMEWORK = "portfolio-based strategic approach"
DEFAULT_EMAIL_SUBJECT = "Strategic Communication"

STRATEGIC_ANALYSIS_TEMPLATE = (
    "\n"
    "Strategic Analysis Update\n"
    "\n"
    "## Key Insights\n"
    "{insights}\n"
    "\n"
    "## Project Context Updates\n"
    "{projects}\n"
    "\n"
    "## Additional Research Needed\n"
    "{research}\n"
    "\n"
    "## Strategic Synthesis\n"
    "Cross-project implications and strategic positioning adjustments identified.\n"
)

INSIGHTS_BRIEF_TEMPLATE = (
    "\n"
    "Strategic insights brief\n"
    "Custom strategic communication\n"
    "Key insights: {excerpt}...\n"
    "    "
)

DASHBOARD_TEMPLATE = (
    "\n"
    "Dashboard Update with Strategic Context\n"
    "\n"
    "{dashboard}\n"
    "\n"
    "Focus: {focus}\n"
    "Strategic Context: {context}\n"
)

EMAIL_TEMPLATE = (
    "\n"
    "{type}\n"
    "\n"
    "{content}\n"
    "\n"
    "Recipient context: {recipient}\n"
    "Strategic framework: {framework}\n"
    "    "
)


# ════════════════════════════════════════════════════════════════
# Section Formatters
# ════════════════════════════════════════════════════════════════


def utf16_length(text: str) -> int:
    """Length of text in UTF-16 code units; astral characters such as emoji count as two."""
    return len(text.encode("utf-16-le")) // 2


def utf16_prefix(text: str, units: int) -> str:
    """
    PURPOSE: Return the first `units` UTF-16 code units of text.

    A surrogate pair split by the cut is dropped whole rather than leaving a
    lone surrogate that cannot be encoded into the issue body.
    """
    return text.encode("utf-16-le")[: units * 2].decode("utf-16-le", errors="ignore")


def render_value(value: Any) -> str:
    """
    PURPOSE: Render a loosely-typed JSON value as issue text.

    Integral floats drop their ".0", booleans render lowercase, None renders
    "null" and containers render as compact JSON.

    Examples:
        50.0  → "50"
        True  → "true"
        [1,2] → "[1,2]"
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def format_project_updates(
    projects: Optional[Mapping[str, Union[ProjectUpdate, Mapping[str, Any]]]],
) -> str:
    """
    PURPOSE: Render project updates as one markdown line per project.

    Each line reads "**<project>:** <progress>% - <context>", in mapping order.
    A progress of 0 counts as absent, like every other fallback.

    CALLED BY: build_strategic_analysis_issues()

    Args:
        projects: Mapping of project name to ProjectUpdate (or its dict form).

    Returns:
        str: Newline-joined lines, or the fallback line when projects is None.
    """
    if projects is None:
        return NO_PROJECT_UPDATES

    lines = []
    for project, update in projects.items():
        if not isinstance(update, ProjectUpdate):
            update = ProjectUpdate.model_validate(update)
        progress = render_value(update.progress) if update.progress else NO_PROGRESS
        context = update.context or DEFAULT_PROJECT_CONTEXT
        lines.append(f"**{project}:** {progress}% - {context}")
    return "\n".join(lines)


def format_dashboard_updates(data: Optional[Union[DashboardData, Mapping[str, Any]]]) -> str:
    """
    PURPOSE: Render dashboard project values as "<project>: <value>" lines.

    CALLED BY: build_dashboard_issue()

    Args:
        data: DashboardData (or its dict form).

    Returns:
        str: Newline-joined lines, or the general fallback line when data or
            its projects mapping is absent.
    """
    if data is None:
        return GENERAL_DASHBOARD_UPDATE
    if not isinstance(data, DashboardData):
        data = DashboardData.model_validate(data)
    if data.projects is None:
        return GENERAL_DASHBOARD_UPDATE

    return "\n".join(f"{project}: {render_value(value)}" for project, value in data.projects.items())


# ════════════════════════════════════════════════════════════════
# Issue Builders
# ════════════════════════════════════════════════════════════════


def build_strategic_analysis_issues(
    insights: Optional[str],
    projects: Optional[Mapping[str, Union[ProjectUpdate, Mapping[str, Any]]]],
    research: Optional[str] = None,
) -> List[IssuePayload]:
    """
    PURPOSE: Build the strategic analysis issue, plus an insights brief when insights are long.

    The brief is added only when insights exceed INSIGHTS_BRIEF_THRESHOLD
    UTF-16 code units and carries the first INSIGHTS_BRIEF_EXCERPT units of them.

    Returns:
        list[IssuePayload]: One or two issues, analysis first.
    """
    issues = [
        IssuePayload(
            title=STRATEGIC_ANALYSIS_TITLE,
            body=STRATEGIC_ANALYSIS_TEMPLATE.format(
                insights=insights or DEFAULT_INSIGHTS,
                projects=format_project_updates(projects),
                research=research or DEFAULT_RESEARCH,
            ),
        )
    ]

    if insights and utf16_length(insights) > INSIGHTS_BRIEF_THRESHOLD:
        issues.append(
            IssuePayload(
                title=INSIGHTS_BRIEF_TITLE,
                body=INSIGHTS_BRIEF_TEMPLATE.format(excerpt=utf16_prefix(insights, INSIGHTS_BRIEF_EXCERPT)),
            )
        )

    return issues


def build_dashboard_issue(data: Union[DashboardData, Mapping[str, Any]]) -> IssuePayload:
    """Build the contextual dashboard update issue."""
    if not isinstance(data, DashboardData):
        data = DashboardData.model_validate(data)

    return IssuePayload(
        title=DASHBOARD_TITLE,
        body=DASHBOARD_TEMPLATE.format(
            dashboard=format_dashboard_updates(data),
            focus=data.current_focus or DEFAULT_FOCUS,
            context=data.context or DEFAULT_DASHBOARD_CONTEXT,
        ),
    )


def build_email_issue(email: Union[EmailRequest, Mapping[str, Any]]) -> IssuePayload:
    """Build one [EMAIL] issue from a single email request."""
    if not isinstance(email, EmailRequest):
        email = EmailRequest.model_validate(email)

    return IssuePayload(
        title=f"{EMAIL_TITLE_PREFIX}{email.subject or DEFAULT_EMAIL_SUBJECT}",
        body=EMAIL_TEMPLATE.format(
            type=email.type or DEFAULT_EMAIL_TYPE,
            content=email.content or DEFAULT_EMAIL_CONTENT,
            recipient=email.recipient or DEFAULT_EMAIL_RECIPIENT,
            framework=email.framework or DEFAULT_EMAIL_FRAMEWORK,
        ),
    )
