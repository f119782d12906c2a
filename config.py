"""Configuration management for the Text Analytics client."""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_ENDPOINT = "https://westus.api.cognitive.microsoft.com/text/analytics/v2.0/"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Text Analytics
    text_analytics_key: str = os.getenv("TEXT_ANALYTICS_KEY", "")
    text_analytics_endpoint: str = os.getenv("TEXT_ANALYTICS_ENDPOINT", DEFAULT_ENDPOINT)

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

    def validate(self) -> list[str]:
        """Validate required settings and return list of missing keys."""
        missing = []

        if not self.text_analytics_key:
            missing.append("TEXT_ANALYTICS_KEY")

        if not self.text_analytics_endpoint:
            missing.append("TEXT_ANALYTICS_ENDPOINT")

        return missing

    def has_api_key(self) -> bool:
        """Check if the subscription key is configured."""
        return bool(self.text_analytics_key)


# Global settings instance
settings = Settings()
