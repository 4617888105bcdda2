"""
PURPOSE: Strategic update webhook route for the relay.

Provides the single inbound endpoint that accepts strategic update payloads
and relays them as GitHub issues.

Only POST is routed; any other method is answered with 405 by the exception
handlers registered in strategy_relay/main.py.

CALLED BY:
    - Conversation assistants posting strategic updates (POST, public)
"""

import json
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from strategy_relay.core.errors import InvalidPayloadError, ProcessingFailed
from strategy_relay.schemas.issue import StrategicUpdateResponse
from strategy_relay.schemas.update import parse_update_request
from strategy_relay.tracker.github_client import GitHubIssueClient, get_issue_client
from strategy_relay.utils.logger import get_logger
from strategy_relay.utils.time_utils import to_iso_timestamp
from strategy_relay.webhook.processor import StrategicUpdateProcessor

logger = get_logger(__name__)

router = APIRouter(tags=["webhook"])


# ════════════════════════════════════════════════════════════════
# Internal Helpers
# ════════════════════════════════════════════════════════════════


async def _read_json_body(request: Request) -> Any:
    """
    PURPOSE: Decode the request body as JSON.

    An empty body decodes to an empty object so that it is reported as an
    unknown action rather than a decoding failure.

    Raises:
        InvalidPayloadError: Body is not valid JSON.
    """
    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("strategic_update_body_not_json", error=str(e))
        raise InvalidPayloadError(
            details=[{"loc": ["body"], "msg": "Request body is not valid JSON", "type": "json_invalid"}],
        ) from e


# ════════════════════════════════════════════════════════════════
# Public Inbound Endpoint
# ════════════════════════════════════════════════════════════════


@router.post("/watson-bridge")
async def watson_bridge(
    request: Request,
    client: GitHubIssueClient = Depends(get_issue_client),
) -> Dict[str, Any]:
    """
    PURPOSE: Receive a strategic update and relay it to the issue tracker.

    On receipt the update is:
      1. Logged with its action and conversation type.
      2. Validated into one of the four action variants (HTTP 400 on failure).
      3. Formatted into issues and sent to GitHub sequentially.
      4. Acknowledged with a timestamped success envelope.

    Args:
        request: FastAPI Request carrying the raw JSON body.
        client:  Tracker client (overridable dependency).

    Returns:
        dict: {"success": true, "message": ..., "timestamp": "<ISO-8601>"}

    Raises:
        HTTP 400: Unknown action type or invalid payload.
        HTTP 500: Formatting, configuration or tracker failure.
    """
    payload = await _read_json_body(request)

    logger.info(
        "strategic_update_received",
        action=payload.get("action") if isinstance(payload, dict) else None,
        conversation_type=payload.get("conversationType") if isinstance(payload, dict) else None,
        timestamp=to_iso_timestamp(),
    )

    update = parse_update_request(payload)

    try:
        processor = StrategicUpdateProcessor(client)
        created = await processor.process(update)
    except Exception as e:
        logger.error(
            "webhook_processing_failed",
            action=update.action,
            error=str(e),
            exception_type=type(e).__name__,
        )
        raise ProcessingFailed(e) from e

    logger.info(
        "strategic_update_processed",
        action=update.action,
        issues_created=len(created),
    )

    return StrategicUpdateResponse(timestamp=to_iso_timestamp()).model_dump()
