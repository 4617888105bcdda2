"""
Inbound strategic update schemas for the relay webhook.

The webhook payload is modelled as a discriminated union on `action`. Each
variant carries only the fields its processing path reads. Wire names stay
camelCase through field aliases; unknown fields are ignored.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from strategy_relay.core.errors import InvalidPayloadError, UnknownActionError


STRATEGIC_ANALYSIS = "strategic-analysis"
DASHBOARD_UPDATE = "dashboard-update"
SEND_EMAIL = "send-email"
COMPLEX_UPDATE = "complex-update"

ACTIONS = (STRATEGIC_ANALYSIS, DASHBOARD_UPDATE, SEND_EMAIL, COMPLEX_UPDATE)


class _WireModel(BaseModel):
    """Base for payload models: camelCase aliases, extra fields ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ProjectUpdate(_WireModel):
    """
    Progress report for a single project.

    Attributes:
        progress: Completion percentage (optional)
        context: Free-text strategic context (optional)
    """

    progress: Optional[Union[int, float]] = None
    context: Optional[str] = None


class EmailRequest(_WireModel):
    """
    A strategic communication to be filed as an [EMAIL] issue.

    Attributes:
        type: Communication kind, rendered as the first body line
        content: Message content
        recipient: Recipient context
        framework: Strategic framework the message follows
        subject: Issue title suffix
    """

    type: Optional[str] = None
    content: Optional[str] = None
    recipient: Optional[str] = None
    framework: Optional[str] = None
    subject: Optional[str] = None


class DashboardData(_WireModel):
    """
    Dashboard snapshot sent with dashboard-update and complex-update.

    Attributes:
        projects: Mapping of project name to any displayable value
        current_focus: Current portfolio focus (wire name `currentFocus`)
        context: Strategic context of the update
    """

    projects: Optional[Dict[str, Any]] = None
    current_focus: Optional[str] = Field(default=None, alias="currentFocus")
    context: Optional[str] = None


class StrategicAnalysisRequest(_WireModel):
    action: Literal["strategic-analysis"]
    conversation_type: Optional[Any] = Field(default=None, alias="conversationType")
    strategic_insights: Optional[str] = Field(default=None, alias="strategicInsights")
    project_updates: Optional[Dict[str, ProjectUpdate]] = Field(default=None, alias="projectUpdates")
    research_needs: Optional[str] = Field(default=None, alias="researchNeeds")


class DashboardUpdateRequest(_WireModel):
    action: Literal["dashboard-update"]
    conversation_type: Optional[Any] = Field(default=None, alias="conversationType")
    dashboard_data: DashboardData = Field(alias="dashboardData")


class SendEmailRequest(_WireModel):
    action: Literal["send-email"]
    conversation_type: Optional[Any] = Field(default=None, alias="conversationType")
    email_requests: List[EmailRequest] = Field(alias="emailRequests")


class ComplexUpdateRequest(_WireModel):
    action: Literal["complex-update"]
    conversation_type: Optional[Any] = Field(default=None, alias="conversationType")
    project_updates: Optional[Dict[str, ProjectUpdate]] = Field(default=None, alias="projectUpdates")
    strategic_insights: Optional[str] = Field(default=None, alias="strategicInsights")
    dashboard_data: Optional[DashboardData] = Field(default=None, alias="dashboardData")
    email_requests: Optional[List[EmailRequest]] = Field(default=None, alias="emailRequests")


UpdateRequest = Annotated[
    Union[
        StrategicAnalysisRequest,
        DashboardUpdateRequest,
        SendEmailRequest,
        ComplexUpdateRequest,
    ],
    Field(discriminator="action"),
]

_update_request_adapter: TypeAdapter = TypeAdapter(UpdateRequest)


def parse_update_request(payload: Any) -> UpdateRequest:
    """
    Validate a decoded JSON payload into one of the four request variants.

    Args:
        payload: Decoded JSON body. Anything other than an object carries no action.

    Returns:
        The matching request variant.

    Raises:
        UnknownActionError: `action` is absent (including non-object bodies) or not a known value.
        InvalidPayloadError: A known action's fields are malformed.
    """
    if not isinstance(payload, dict):
        raise UnknownActionError(None)

    action = payload.get("action")
    if action not in ACTIONS:
        raise UnknownActionError(action)

    try:
        return _update_request_adapter.validate_python(payload)
    except ValidationError as e:
        raise InvalidPayloadError(
            details=e.errors(include_url=False, include_context=False),
            message=f"Invalid {action} payload",
        ) from e
