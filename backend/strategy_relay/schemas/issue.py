"""
Issue and response schemas for the Strategic Update Relay.

Handles the outbound issue unit sent to GitHub and the success envelope
returned to the webhook caller.
"""

from pydantic import BaseModel, ConfigDict, field_validator


class IssuePayload(BaseModel):
    """
    A single issue to be created on the tracker.

    Attributes:
        title: Issue title, never blank
        body: Issue body text, never blank
    """

    model_config = ConfigDict(frozen=True)

    title: str
    body: str

    @field_validator("title", "body")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Validate that title and body carry text."""
        if not v.strip():
            raise ValueError("issue title and body must not be blank")
        return v


class StrategicUpdateResponse(BaseModel):
    """
    Success envelope returned by the webhook.

    Attributes:
        success: Always True
        message: Fixed confirmation message
        timestamp: ISO-8601 UTC time of the response
    """

    success: bool = True
    message: str = "Strategic update processed successfully"
    timestamp: str
