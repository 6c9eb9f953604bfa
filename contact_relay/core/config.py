from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List, Optional

class Settings(BaseSettings):
    # Slack credentials - must be provided via environment variables
    slack_token: Optional[str] = None
    slack_channel_id: Optional[str] = None
    slack_api_url: str = "https://slack.com/api"
    slack_timeout: float = 10.0

    # Timezone used for the timestamp footer of each notification
    notification_timezone: str = "Europe/Istanbul"

    # CORS settings
    allowed_origins: List[str] = ["*"]

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def is_slack_configured(self) -> bool:
        return bool(self.slack_token) and bool(self.slack_channel_id)

    def missing_slack_settings(self) -> List[str]:
        """Names of the Slack environment variables that are not set"""
        missing = []
        if not self.slack_token:
            missing.append("SLACK_TOKEN")
        if not self.slack_channel_id:
            missing.append("SLACK_CHANNEL_ID")
        return missing

@lru_cache
def get_settings():
    return Settings()
