"""Slack event dispatch: map parsed events to responses and background work."""

import logging

from fastapi import BackgroundTasks
from fastapi.responses import PlainTextResponse

from notion_unfurl.config import get_settings
from notion_unfurl.models.slack import HandshakeChallenge, InboundEvent, LinkSharedCallback
from notion_unfurl.slack.unfurl import unfurl_links

logger = logging.getLogger(__name__)


def handle_slack_event(
    event: InboundEvent,
    background_tasks: BackgroundTasks,
    retry_num: str | None = None,
) -> PlainTextResponse:
    """Dispatch a parsed Slack event.

    - HandshakeChallenge: echo the challenge as plain text
    - LinkSharedCallback: acknowledge and unfurl in the background
    - anything else: acknowledge with "ok"
    """
    if isinstance(event, HandshakeChallenge):
        return PlainTextResponse(event.challenge)

    if isinstance(event, LinkSharedCallback):
        # Slack retries a delivery it considers failed; the first one is already being unfurled
        if retry_num and get_settings().ignore_slack_retries:
            logger.info("Ignoring Slack retry %s for message %s", retry_num, event.message_ts)
            return PlainTextResponse("ok")

        logger.info(
            "Dispatching %d link(s) from channel %s message %s",
            len(event.links),
            event.channel_id,
            event.message_ts,
        )
        background_tasks.add_task(unfurl_links, event)

    return PlainTextResponse("ok")
