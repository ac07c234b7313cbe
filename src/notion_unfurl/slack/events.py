"""Parse verified Slack Events API bodies into typed InboundEvent variants."""

import json

from pydantic import ValidationError

from notion_unfurl.models.slack import (
    HandshakeChallenge,
    InboundEvent,
    LinkSharedCallback,
    OtherEvent,
)


class EventParseError(ValueError):
    """Raised when a Slack event body cannot be parsed into a known shape."""


def parse_event(body: bytes) -> InboundEvent:
    """Parse a raw Slack event body.

    - url_verification -> HandshakeChallenge
    - event_callback with a link_shared event -> LinkSharedCallback
    - anything else -> OtherEvent

    Raises EventParseError for malformed JSON, a non-object body, a
    url_verification whose challenge is not a string, an event_callback
    without an event object, or a link_shared event missing required fields.
    A url_verification without a challenge echoes an empty one.
    """
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise EventParseError(f"Malformed JSON body: {exc}") from exc

    if not isinstance(payload, dict):
        raise EventParseError("Event body must be a JSON object")

    event_type = payload.get("type")
    try:
        if event_type == "url_verification":
            return HandshakeChallenge.model_validate(payload)
        if event_type == "event_callback":
            return _parse_callback(payload)
    except ValidationError as exc:
        raise EventParseError(f"Invalid {event_type} payload: {exc}") from exc

    return OtherEvent(event_type=str(event_type or ""))


def _parse_callback(payload: dict) -> InboundEvent:
    """Parse the inner event of an event_callback envelope."""
    inner = payload.get("event")
    if not isinstance(inner, dict):
        raise EventParseError("event_callback has no event object")

    inner_type = inner.get("type")
    if inner_type != "link_shared":
        return OtherEvent(event_type=str(inner_type or ""))

    return LinkSharedCallback(
        channel_id=inner.get("channel"),
        message_ts=inner.get("message_ts"),
        links=inner.get("links"),
        unfurl_id=inner.get("unfurl_id"),
        source=inner.get("source"),
    )
