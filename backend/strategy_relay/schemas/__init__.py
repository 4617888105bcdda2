"""
Pydantic v2 schemas for the Strategic Update Relay.

This module exports the inbound update variants, the outbound issue unit and
the webhook response envelope.
"""

from .issue import IssuePayload, StrategicUpdateResponse
from .update import (
    ACTIONS,
    COMPLEX_UPDATE,
    DASHBOARD_UPDATE,
    SEND_EMAIL,
    STRATEGIC_ANALYSIS,
    ComplexUpdateRequest,
    DashboardData,
    DashboardUpdateRequest,
    EmailRequest,
    ProjectUpdate,
    SendEmailRequest,
    StrategicAnalysisRequest,
    UpdateRequest,
    parse_update_request,
)

__all__ = [
    # Actions
    "ACTIONS",
    "STRATEGIC_ANALYSIS",
    "DASHBOARD_UPDATE",
    "SEND_EMAIL",
    "COMPLEX_UPDATE",
    # Payload parts
    "ProjectUpdate",
    "EmailRequest",
    "DashboardData",
    # Request variants
    "StrategicAnalysisRequest",
    "DashboardUpdateRequest",
    "SendEmailRequest",
    "ComplexUpdateRequest",
    "UpdateRequest",
    "parse_update_request",
    # Issue / response
    "IssuePayload",
    "StrategicUpdateResponse",
]
