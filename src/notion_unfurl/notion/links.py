"""Notion link detection, URL normalization, and page id extraction."""

import logging
import re
from urllib.parse import urlsplit, urlunsplit

from notion_unfurl.models.unfurl import NormalizedLink

logger = logging.getLogger(__name__)

# Notion page ids are 32 hex chars, either bare or as a dashed UUID
_PAGE_ID_PATTERN = re.compile(r"[0-9a-f]{32}$", re.IGNORECASE)


def is_supported_domain(domain: str, suffix: str) -> bool:
    """Return True if the Slack-reported domain ends with the supported suffix."""
    return domain.lower().endswith(suffix.lower())


def extract_page_id(url: str) -> str | None:
    """Extract the page id from the last path segment of a Notion URL.

    Handles ``Title-<32 hex>``, bare ``<32 hex>`` and dashed UUID segments.
    When no 32-hex id is present, the token after the last ``-`` is returned
    as-is and left for the Notion API to accept or reject.
    """
    segment = urlsplit(url).path.rstrip("/").rsplit("/", 1)[-1]
    if not segment:
        return None

    match = _PAGE_ID_PATTERN.search(segment.replace("-", ""))
    if match:
        return match.group(0).lower()

    token = segment.rsplit("-", 1)[-1]
    return token or None


def normalize_link(raw_url: str) -> NormalizedLink | None:
    """Strip query and fragment from a Notion URL and extract its page id.

    The Notion API resolves a bare page reference only, so view ids (``?v=``)
    and block anchors (``#...``) are dropped. Returns None if the URL cannot
    be parsed or carries no page id.
    """
    try:
        parts = urlsplit(raw_url)
    except ValueError:
        logger.warning("Failed to parse URL: %s", raw_url, exc_info=True)
        return None

    if not parts.scheme or not parts.netloc:
        logger.warning("URL has no scheme or host: %s", raw_url)
        return None

    url = urlunsplit(parts._replace(query="", fragment=""))
    page_id = extract_page_id(url)
    if page_id is None:
        logger.warning("No page id found in URL: %s", raw_url)
        return None

    return NormalizedLink(url=url, page_id=page_id)
