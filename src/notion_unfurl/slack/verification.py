"""Slack request signature verification as a FastAPI dependency."""

import logging

from fastapi import HTTPException, Request
from slack_sdk.signature import SignatureVerifier

from notion_unfurl.config import get_settings

logger = logging.getLogger(__name__)


def is_valid_signature(body: bytes, timestamp: str, signature: str, signing_secret: str) -> bool:
    """Check a Slack v0 signature over the raw body.

    Malformed input (non-numeric timestamp, non-UTF-8 body, non-ASCII
    signature header) counts as an invalid signature rather than an error. Stale timestamps (older than
    five minutes) are rejected by SignatureVerifier.
    """
    verifier = SignatureVerifier(signing_secret=signing_secret)
    try:
        return verifier.is_valid(
            body=body.decode("utf-8"), timestamp=timestamp, signature=signature
        )
    except (ValueError, TypeError) as exc:
        logger.warning("Malformed Slack signature input: %s", exc)
        return False


async def verify_slack_request(request: Request) -> bytes:
    """Verify Slack request signature and return the raw body.

    Reads the raw body FIRST (before any JSON parsing) to ensure the
    signature verification uses the exact bytes Slack signed.

    Raises HTTPException(400) if the signature is missing or invalid.
    """
    settings = get_settings()
    body = await request.body()

    timestamp = request.headers.get("X-Slack-Request-Timestamp", "")
    signature = request.headers.get("X-Slack-Signature", "")

    if not is_valid_signature(body, timestamp, signature, settings.slack_signing_secret):
        logger.warning("Rejected request with invalid Slack signature")
        raise HTTPException(status_code=400, detail="Invalid Slack signature")

    return body
