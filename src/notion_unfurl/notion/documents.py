"""Fetch a Notion page and its child blocks as a NotionDocument."""

from notion_client import AsyncClient
from notion_client.helpers import async_iterate_paginated_api

from notion_unfurl.config import get_settings
from notion_unfurl.models.unfurl import NotionDocument
from notion_unfurl.notion.markdown import plain_text

# Child pages and databases are rendered by title only, never expanded
_NO_DESCEND = frozenset({"child_page", "child_database"})

# Notion's maximum page_size for blocks.children.list
_MAX_PAGE_SIZE = 100


def page_title(page: dict) -> str:
    """Return the plain text of a page's title property, or empty string."""
    for prop in page.get("properties", {}).values():
        if prop.get("type") == "title":
            return plain_text(prop.get("title", []))
    return ""


def count_blocks(blocks: list[dict]) -> int:
    """Count blocks including every fetched descendant."""
    return sum(1 + count_blocks(block.get("children", [])) for block in blocks)


async def _fetch_blocks(
    client: AsyncClient, block_id: str, limit: int, depth: int
) -> list[dict]:
    """Collect child blocks until ``limit`` blocks, nested ones included, are gathered.

    Descends ``depth - 1`` more levels, and only while the budget is not spent,
    so a page costs at most about ``limit`` list calls.
    """
    blocks: list[dict] = []
    fetched = 0
    async for block in async_iterate_paginated_api(
        client.blocks.children.list,
        block_id=block_id,
        page_size=min(limit, _MAX_PAGE_SIZE),
    ):
        blocks.append(block)
        fetched += 1
        if (
            fetched < limit
            and depth > 1
            and block.get("has_children")
            and block.get("type") not in _NO_DESCEND
        ):
            block["children"] = await _fetch_blocks(client, block["id"], limit - fetched, depth - 1)
            fetched += count_blocks(block["children"])
        if fetched >= limit:
            break
    return blocks


async def fetch_document(client: AsyncClient, page_id: str) -> NotionDocument:
    """Retrieve a page and as many leading blocks as the preview can show.

    Most blocks render to a single line, so the preview line cap doubles as
    the block budget. Lets notion_client errors and httpx errors
    propagate; the resolver decides what a failed fetch means for the link.
    """
    settings = get_settings()
    page = await client.pages.retrieve(page_id=page_id)
    blocks = await _fetch_blocks(
        client,
        page_id,
        limit=settings.preview_max_lines,
        depth=settings.notion_block_depth,
    )
    return NotionDocument(page_id=page_id, title=page_title(page), blocks=blocks)
