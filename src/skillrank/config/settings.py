import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..ranking.ranker import DegeneratePolicy

# Load .env file from the project root
# This file: src/skillrank/config/settings.py
SERVER_ROOT = Path(__file__).resolve().parent.parent.parent.parent
ENV_PATH = SERVER_ROOT / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    # Fallback to simple load_dotenv which looks in cwd
    load_dotenv()


class Settings(BaseModel):
    """Ranking engine settings"""

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    # Ranking
    DEGENERATE_POLICY: DegeneratePolicy = Field(
        default=DegeneratePolicy.ABORT,
        description="What to do with all-zero vectors: abort the request or skip the candidate",
    )

    model_config = {
        "frozen": True
    }


def load_settings() -> Settings:
    """Load settings from environment variables.

    Raises:
        ConfigurationError: If DEGENERATE_POLICY is not a known policy
    """
    return Settings(
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        DEGENERATE_POLICY=DegeneratePolicy.parse(os.getenv("DEGENERATE_POLICY", "abort")),
    )

# Global settings instance
settings = load_settings()
