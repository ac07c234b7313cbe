"""Data models for the Notion unfurl pipeline."""

from notion_unfurl.models.slack import (
    CandidateLink,
    HandshakeChallenge,
    InboundEvent,
    LinkSharedCallback,
    OtherEvent,
)
from notion_unfurl.models.unfurl import DocumentPreview, NormalizedLink, NotionDocument

__all__ = [
    "CandidateLink",
    "HandshakeChallenge",
    "InboundEvent",
    "LinkSharedCallback",
    "OtherEvent",
    "DocumentPreview",
    "NormalizedLink",
    "NotionDocument",
]
