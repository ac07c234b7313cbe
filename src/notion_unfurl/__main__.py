"""Run the service with uvicorn on the configured port: ``python -m notion_unfurl``."""

import uvicorn

from notion_unfurl.config import get_settings


def main() -> None:
    """Serve the app on all interfaces at ``settings.port``.

    uvicorn's own logging config is disabled so the app's JSON logging applies.
    """
    settings = get_settings()
    uvicorn.run("notion_unfurl.app:app", host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
