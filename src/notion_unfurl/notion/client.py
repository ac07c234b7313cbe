"""Async Notion client singleton.

Creates a cached AsyncClient instance configured with the API key from
application settings. The client is shared by every unfurl task.
"""

from notion_client import AsyncClient

from notion_unfurl.config import get_settings

_client: AsyncClient | None = None


async def get_notion_client() -> AsyncClient:
    """Return a cached async Notion client instance.

    Creates the client on first call using notion_api_key from settings.
    Subsequent calls return the cached instance.
    """
    global _client
    if _client is None:
        settings = get_settings()
        _client = AsyncClient(auth=settings.notion_api_key)
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None
