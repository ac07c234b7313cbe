"""Inbound Slack event models.

Parsed events are frozen: once the dispatcher has built one it is handed to the
router (and possibly a background task) unchanged.
"""

from pydantic import BaseModel, ConfigDict


class CandidateLink(BaseModel):
    """A link Slack reports in a ``link_shared`` event."""

    model_config = ConfigDict(frozen=True)

    domain: str  # e.g., "acme.notion.so"
    url: str  # Exactly as posted, used as the unfurl key


class HandshakeChallenge(BaseModel):
    """Slack ``url_verification`` request sent when the endpoint is configured."""

    model_config = ConfigDict(frozen=True)

    token: str = ""
    challenge: str = ""


class LinkSharedCallback(BaseModel):
    """An ``event_callback`` wrapping a ``link_shared`` event."""

    model_config = ConfigDict(frozen=True)

    channel_id: str
    message_ts: str  # Slack message ts, e.g., "1234567890.123456"
    links: list[CandidateLink]
    unfurl_id: str | None = None
    source: str | None = None  # "conversations_history" or "composer"


class OtherEvent(BaseModel):
    """Any event this service acknowledges without acting on."""

    model_config = ConfigDict(frozen=True)

    event_type: str


InboundEvent = HandshakeChallenge | LinkSharedCallback | OtherEvent
