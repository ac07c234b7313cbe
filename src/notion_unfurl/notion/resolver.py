"""Resolve one Slack candidate link into a DocumentPreview.

Every per-link failure (unsupported domain, unparseable URL, fetch error,
missing title) ends in ``None`` plus a log line. Nothing is raised for them,
so one bad link never affects the rest of the batch.
"""

import logging

import httpx
from notion_client import AsyncClient
from notion_client import errors as notion_errors

from notion_unfurl.config import get_settings
from notion_unfurl.models.slack import CandidateLink
from notion_unfurl.models.unfurl import DocumentPreview, NotionDocument
from notion_unfurl.notion.documents import fetch_document
from notion_unfurl.notion.links import is_supported_domain, normalize_link
from notion_unfurl.notion.markdown import document_to_markdown
from notion_unfurl.notion.preview import build_preview_text

logger = logging.getLogger(__name__)

_FETCH_ERRORS = (
    notion_errors.HTTPResponseError,
    notion_errors.RequestTimeoutError,
    httpx.HTTPError,
)


def resolve_title(document: NotionDocument) -> str:
    """Return the page title, falling back to the first embedded database.

    Only the first ``child_database`` block is considered; an unnamed first
    database yields an empty title even if a later one is named.
    """
    if document.title:
        return document.title
    for block in document.blocks:
        if block.get("type") == "child_database":
            return block.get("child_database", {}).get("title", "")
    return ""


async def resolve_link(client: AsyncClient, link: CandidateLink) -> DocumentPreview | None:
    """Fetch the Notion page behind ``link`` and build its preview.

    Returns None when the link is not a Notion link or cannot be resolved.
    """
    settings = get_settings()

    if not is_supported_domain(link.domain, settings.unfurl_domain_suffix):
        return None

    normalized = normalize_link(link.url)
    if normalized is None:
        return None

    try:
        document = await fetch_document(client, normalized.page_id)
    except _FETCH_ERRORS as exc:
        logger.warning("Failed to fetch Notion page %s: %s", normalized.url, exc)
        return None

    title = resolve_title(document)
    if not title:
        logger.info("No title found for Notion page %s, skipping", normalized.url)
        return None

    body_text = build_preview_text(
        document_to_markdown(document),
        max_lines=settings.preview_max_lines,
        max_chars=settings.preview_max_chars,
    )
    return DocumentPreview(title=title, body_text=body_text, source_url=link.url)
