"""
PURPOSE: Error taxonomy for the Strategic Update Relay.

Every error the webhook can surface derives from StrategyRelayError. Errors that
reach the client carry their HTTP status and JSON body; tracker-side errors
(UpstreamFailure, TrackerConfigurationError) are wrapped in ProcessingFailed at
the route boundary.

CALLED BY:
    - strategy_relay/schemas/update.py (payload parsing)
    - strategy_relay/tracker/github_client.py (outbound calls)
    - strategy_relay/api/routes_webhook.py and strategy_relay/main.py (HTTP mapping)
"""

from typing import Any, Dict, List, Optional


class StrategyRelayError(Exception):
    """
    PURPOSE: Base class for all relay errors.

    Attributes:
        http_status: HTTP status code returned to the webhook caller.
        error:       Value of the "error" field in the JSON response body.
    """

    http_status: int = 500
    error: str = "Processing failed"

    def to_response_body(self) -> Dict[str, Any]:
        """Return the JSON body sent to the webhook caller."""
        return {"error": self.error}


class MethodNotAllowed(StrategyRelayError):
    """Raised for any inbound HTTP method other than POST."""

    http_status = 405
    error = "Method not allowed"

    def __init__(self, method: str = "") -> None:
        super().__init__(f"Method {method} not allowed" if method else self.error)
        self.method = method


class BadRequest(StrategyRelayError):
    """Client sent a payload the relay cannot dispatch."""

    http_status = 400
    error = "Bad request"


class UnknownActionError(BadRequest):
    """Raised when `action` is absent or not one of the four known values."""

    error = "Unknown action type"

    def __init__(self, action: Any = None) -> None:
        super().__init__(f"Unknown action type: {action!r}")
        self.action = action


class InvalidPayloadError(BadRequest):
    """
    PURPOSE: Raised when a payload for a known action fails validation.

    Attributes:
        details: List of validation error dicts returned to the caller.
    """

    error = "Invalid request payload"

    def __init__(self, details: Optional[List[Dict[str, Any]]] = None, message: str = "") -> None:
        super().__init__(message or self.error)
        self.details = details or []

    def to_response_body(self) -> Dict[str, Any]:
        return {"error": self.error, "details": self.details}


class UpstreamFailure(StrategyRelayError):
    """
    PURPOSE: Raised when the issue tracker answers with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the tracker.
        body:        Response body text returned by the tracker.
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"GitHub API error: {status_code} {body}")
        self.status_code = status_code
        self.body = body


class TrackerConfigurationError(StrategyRelayError):
    """Raised at call time when tracker credentials or repository are not configured."""

    def __init__(self, missing: List[str]) -> None:
        super().__init__(
            "Issue tracker is not configured; missing settings: " + ", ".join(missing)
        )
        self.missing = missing


class ProcessingFailed(StrategyRelayError):
    """
    PURPOSE: Catch-all for any failure raised while formatting or dispatching.

    The triggering error's message is returned to the caller as "details".
    """

    http_status = 500
    error = "Processing failed"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @property
    def details(self) -> str:
        return str(self.cause)

    def to_response_body(self) -> Dict[str, Any]:
        return {"error": self.error, "details": self.details}
