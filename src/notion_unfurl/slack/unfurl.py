"""Unfurl aggregation: resolve every link of an event and post one chat.unfurl call.

Runs as a background task after the webhook has been acknowledged, so nothing
here may raise: per-link failures are skipped and post failures are logged.
"""

import asyncio
import logging

from slack_sdk.errors import SlackApiError

from notion_unfurl.config import get_settings
from notion_unfurl.models.slack import CandidateLink, LinkSharedCallback
from notion_unfurl.models.unfurl import DocumentPreview
from notion_unfurl.notion.client import get_notion_client
from notion_unfurl.notion.resolver import resolve_link
from notion_unfurl.slack.client import get_slack_client

logger = logging.getLogger(__name__)


def build_attachment(preview: DocumentPreview, footer: str) -> dict:
    """Build the Slack attachment shown for one unfurled link."""
    return {
        "title": preview.title,
        "title_link": preview.source_url,
        "footer": footer,
        "text": preview.body_text,
    }


async def build_unfurl_batch(links: list[CandidateLink]) -> dict[str, DocumentPreview]:
    """Resolve all links in parallel and keep the successful previews.

    Keys are the original URLs from the event. Each URL is resolved once even
    if Slack reports it several times.
    """
    unique = list({link.url: link for link in links}.values())
    client = await get_notion_client()
    results = await asyncio.gather(
        *[resolve_link(client, link) for link in unique],
        return_exceptions=True,
    )

    batch: dict[str, DocumentPreview] = {}
    for link, result in zip(unique, results):
        if isinstance(result, Exception):
            logger.error("Failed to resolve %s: %s", link.url, result, exc_info=result)
        elif isinstance(result, DocumentPreview):
            batch[link.url] = result
    return batch


async def post_unfurls(event: LinkSharedCallback, batch: dict[str, DocumentPreview]) -> None:
    """Attach all previews to the original message in a single chat.unfurl call."""
    settings = get_settings()
    unfurls = {
        url: build_attachment(preview, settings.unfurl_footer) for url, preview in batch.items()
    }

    # Links typed in the message composer are addressed by unfurl_id, not channel/ts
    if event.source == "composer" and event.unfurl_id:
        target = {"source": event.source, "unfurl_id": event.unfurl_id}
    else:
        target = {"channel": event.channel_id, "ts": event.message_ts}

    try:
        client = await get_slack_client()
        await client.chat_unfurl(unfurls=unfurls, **target)
        logger.info("Unfurled %d link(s) for message %s", len(unfurls), event.message_ts)
    except SlackApiError:
        logger.warning("Failed to post unfurls for message %s", event.message_ts, exc_info=True)


async def unfurl_links(event: LinkSharedCallback) -> None:
    """Resolve the event's links and post the unfurls, if any resolved."""
    try:
        batch = await build_unfurl_batch(event.links)
        if not batch:
            logger.info("No links resolved for message %s", event.message_ts)
            return
        await post_unfurls(event, batch)
    except Exception as exc:
        logger.error("Unfurl failed for message %s: %s", event.message_ts, exc, exc_info=True)
