"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Slack
    slack_bot_token: str = ""
    slack_signing_secret: str = ""
    ignore_slack_retries: bool = True

    # Notion
    notion_api_key: str = ""
    notion_block_depth: int = 2

    # Unfurl
    unfurl_domain_suffix: str = ".notion.so"
    unfurl_footer: str = "Notion"
    preview_max_lines: int = 25
    preview_max_chars: int = 1000

    # App
    log_level: str = "INFO"
    port: int = 8080

    def missing_required(self) -> list[str]:
        """Return env var names of required settings that are empty."""
        missing = []
        if not self.slack_signing_secret:
            missing.append("SLACK_SIGNING_SECRET")
        if not self.slack_bot_token:
            missing.append("SLACK_BOT_TOKEN")
        return missing


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
