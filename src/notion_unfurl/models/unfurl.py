"""Models for the resolve-and-unfurl pipeline."""

from pydantic import BaseModel, ConfigDict


class NormalizedLink(BaseModel):
    """A Notion URL stripped of query and fragment, with its page id."""

    model_config = ConfigDict(frozen=True)

    url: str
    page_id: str


class NotionDocument(BaseModel):
    """A fetched Notion page: its title and child blocks.

    Blocks are raw Notion API block objects. Nested children, when fetched,
    are attached under a ``children`` key on the parent block.
    """

    page_id: str
    title: str = ""
    blocks: list[dict] = []


class DocumentPreview(BaseModel):
    """Title and bounded preview text for one unfurled link."""

    title: str
    body_text: str
    source_url: str  # Original URL from the Slack event
