"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from notion_unfurl.config import get_settings
from notion_unfurl.logging_config import configure_logging
from notion_unfurl.slack.router import router as slack_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load config on startup.

    Refuses to start without the Slack credentials needed to verify and
    answer events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    missing = settings.missing_required()
    if missing:
        raise RuntimeError(f"Required environment variables are empty: {', '.join(missing)}")
    app.state.settings = settings
    yield


app = FastAPI(
    title="Notion Unfurl",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "notion-unfurl",
        "version": "0.1.0",
    }
