"""Notion side of the unfurl pipeline: link parsing, page fetch, and preview rendering."""

from notion_unfurl.notion.client import get_notion_client, reset_client
from notion_unfurl.notion.documents import fetch_document, page_title
from notion_unfurl.notion.links import extract_page_id, is_supported_domain, normalize_link
from notion_unfurl.notion.markdown import document_to_markdown
from notion_unfurl.notion.preview import build_preview_text
from notion_unfurl.notion.resolver import resolve_link, resolve_title

__all__ = [
    "build_preview_text",
    "document_to_markdown",
    "extract_page_id",
    "fetch_document",
    "get_notion_client",
    "is_supported_domain",
    "normalize_link",
    "page_title",
    "reset_client",
    "resolve_link",
    "resolve_title",
]
