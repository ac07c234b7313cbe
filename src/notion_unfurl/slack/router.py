"""Slack webhook router with signature verification."""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from notion_unfurl.slack.events import EventParseError, parse_event
from notion_unfurl.slack.handlers import handle_slack_event
from notion_unfurl.slack.verification import verify_slack_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["slack"])


@router.get("/", response_class=PlainTextResponse)
async def index() -> str:
    """Liveness greeting."""
    return "Hello"


@router.post("/")
async def slack_events(
    request: Request,
    background_tasks: BackgroundTasks,
    body: bytes = Depends(verify_slack_request),
) -> PlainTextResponse:
    """Receive Slack Events API deliveries.

    The body is parsed only after its signature has been verified. Parse
    failures are answered with 400.
    """
    try:
        event = parse_event(body)
    except EventParseError as exc:
        logger.warning("Rejected Slack event: %s", exc)
        raise HTTPException(status_code=400, detail="Malformed Slack event") from exc

    return handle_slack_event(
        event,
        background_tasks,
        retry_num=request.headers.get("X-Slack-Retry-Num"),
    )
