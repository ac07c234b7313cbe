"""Tests for the inbound Slack event models."""

import pytest
from pydantic import ValidationError

from notion_unfurl.models.slack import CandidateLink, HandshakeChallenge, LinkSharedCallback


def test_candidate_link_valid():
    link = CandidateLink(domain="acme.notion.so", url="https://acme.notion.so/Doc-abc")
    assert link.domain == "acme.notion.so"
    assert link.url == "https://acme.notion.so/Doc-abc"


def test_candidate_link_requires_url():
    with pytest.raises(ValidationError):
        CandidateLink(domain="acme.notion.so")


def test_handshake_token_defaults_empty():
    assert HandshakeChallenge(challenge="abc").token == ""


def test_handshake_challenge_defaults_empty():
    assert HandshakeChallenge().challenge == ""


def test_link_shared_callback_defaults():
    """unfurl_id and source are optional."""
    event = LinkSharedCallback(channel_id="C1", message_ts="1.2", links=[])
    assert event.unfurl_id is None
    assert event.source is None
    assert event.links == []


def test_link_shared_callback_coerces_link_dicts():
    event = LinkSharedCallback(
        channel_id="C1",
        message_ts="1.2",
        links=[{"domain": "a.notion.so", "url": "https://a.notion.so/X", "extra": 1}],
    )
    assert event.links == [CandidateLink(domain="a.notion.so", url="https://a.notion.so/X")]


def test_link_shared_callback_is_frozen():
    event = LinkSharedCallback(channel_id="C1", message_ts="1.2", links=[])
    with pytest.raises(ValidationError):
        event.message_ts = "3.4"
