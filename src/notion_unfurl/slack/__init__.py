"""Slack ingress: webhook handling, signature verification, event parsing, and unfurl posting."""

from notion_unfurl.slack.client import get_slack_client, reset_client
from notion_unfurl.slack.events import EventParseError, parse_event
from notion_unfurl.slack.router import router
from notion_unfurl.slack.unfurl import unfurl_links

__all__ = [
    "EventParseError",
    "get_slack_client",
    "parse_event",
    "reset_client",
    "router",
    "unfurl_links",
]
