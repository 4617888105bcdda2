"""
PURPOSE: Tests for the strategic update request schemas.

Tests validation of the tagged union over actions:
- Dispatch of each action to its request variant
- Unknown / absent action rejection
- Malformed payloads for known actions
- IssuePayload blank-text guard
"""

import pytest
from pydantic import ValidationError

from strategy_relay.core.errors import InvalidPayloadError, UnknownActionError
from strategy_relay.schemas.issue import IssuePayload, StrategicUpdateResponse
from strategy_relay.schemas.update import (
    ComplexUpdateRequest,
    DashboardUpdateRequest,
    SendEmailRequest,
    StrategicAnalysisRequest,
    parse_update_request,
)


class TestParseUpdateRequest:
    """Test action dispatch into request variants."""

    def test_strategic_analysis(self):
        update = parse_update_request(
            {
                "action": "strategic-analysis",
                "conversationType": "portfolio-review",
                "strategicInsights": "Focus on Atlas",
                "projectUpdates": {"Atlas": {"progress": 75}},
                "researchNeeds": "Competitor pricing",
            }
        )
        assert isinstance(update, StrategicAnalysisRequest)
        assert update.conversation_type == "portfolio-review"
        assert update.strategic_insights == "Focus on Atlas"
        assert update.project_updates["Atlas"].progress == 75
        assert update.research_needs == "Competitor pricing"

    def test_dashboard_update(self):
        update = parse_update_request(
            {"action": "dashboard-update", "dashboardData": {"currentFocus": "Launch"}}
        )
        assert isinstance(update, DashboardUpdateRequest)
        assert update.dashboard_data.current_focus == "Launch"
        assert update.dashboard_data.projects is None

    def test_send_email(self):
        update = parse_update_request(
            {"action": "send-email", "emailRequests": [{"subject": "A"}, {}]}
        )
        assert isinstance(update, SendEmailRequest)
        assert [email.subject for email in update.email_requests] == ["A", None]

    def test_complex_update_with_nothing(self):
        update = parse_update_request({"action": "complex-update"})
        assert isinstance(update, ComplexUpdateRequest)
        assert update.dashboard_data is None
        assert update.email_requests is None

    @pytest.mark.parametrize("conversation_type", [{"kind": "review"}, 7, ["a", "b"], "portfolio-review"])
    def test_conversation_type_is_opaque(self, conversation_type):
        update = parse_update_request(
            {"action": "strategic-analysis", "conversationType": conversation_type}
        )
        assert update.conversation_type == conversation_type

    def test_extra_fields_ignored(self):
        update = parse_update_request({"action": "complex-update", "unexpected": 1})
        assert not hasattr(update, "unexpected")

    def test_project_order_preserved(self):
        update = parse_update_request(
            {
                "action": "strategic-analysis",
                "projectUpdates": {"Zeta": {}, "Alpha": {}, "Mid": {}},
            }
        )
        assert list(update.project_updates) == ["Zeta", "Alpha", "Mid"]


class TestParseUpdateRequestErrors:
    """Test rejection of undispatchable payloads."""

    def test_missing_action(self):
        with pytest.raises(UnknownActionError):
            parse_update_request({"strategicInsights": "x"})

    def test_unknown_action(self):
        with pytest.raises(UnknownActionError) as exc_info:
            parse_update_request({"action": "delete-everything"})
        assert exc_info.value.to_response_body() == {"error": "Unknown action type"}

    def test_non_string_action(self):
        with pytest.raises(UnknownActionError):
            parse_update_request({"action": ["send-email"]})

    def test_email_requests_not_a_sequence(self):
        with pytest.raises(InvalidPayloadError) as exc_info:
            parse_update_request({"action": "send-email", "emailRequests": "hello"})
        body = exc_info.value.to_response_body()
        assert body["error"] == "Invalid request payload"
        assert body["details"]

    def test_send_email_requires_email_requests(self):
        with pytest.raises(InvalidPayloadError):
            parse_update_request({"action": "send-email"})

    def test_dashboard_update_requires_dashboard_data(self):
        with pytest.raises(InvalidPayloadError):
            parse_update_request({"action": "dashboard-update"})

    @pytest.mark.parametrize("payload", [[], ["strategic-analysis"], "send-email", 42, None])
    def test_body_not_an_object_has_no_action(self, payload):
        with pytest.raises(UnknownActionError) as exc_info:
            parse_update_request(payload)
        assert exc_info.value.to_response_body() == {"error": "Unknown action type"}


class TestIssuePayload:
    """Test IssuePayload invariants."""

    def test_valid_issue(self):
        issue = IssuePayload(title="[EMAIL] Hi", body="\nBody\n")
        assert issue.model_dump() == {"title": "[EMAIL] Hi", "body": "\nBody\n"}

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            IssuePayload(title="  ", body="Body")
        assert "must not be blank" in str(exc_info.value)

    def test_blank_body_rejected(self):
        with pytest.raises(ValidationError):
            IssuePayload(title="Title", body="")


class TestStrategicUpdateResponse:
    """Test the success envelope."""

    def test_defaults(self):
        response = StrategicUpdateResponse(timestamp="2024-02-19T10:00:00.000Z")
        assert response.model_dump() == {
            "success": True,
            "message": "Strategic update processed successfully",
            "timestamp": "2024-02-19T10:00:00.000Z",
        }
