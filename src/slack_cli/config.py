from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    SLACK_API_KEY: Optional[str] = Field(None, description="Slack Bot User OAuth Token")
    SLACK_USER_TOKEN_FILE: str = Field("~/.slack/api-token", description="Per-user token file")
    SLACK_SYSTEM_TOKEN_FILE: str = Field("/etc/slack/api-token", description="System-wide token file")
    SLACK_API_URL: str = Field("https://slack.com/api/", description="Slack Web API base URL")
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()
