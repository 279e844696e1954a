"""Web application configuration"""
import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from skillrank.errors import ConfigurationError

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Bundled sample data
DATA_DIR = PROJECT_ROOT / "web" / "data"
DEFAULT_CANDIDATE_FILE = DATA_DIR / "MOCK_DATA.json"


class WebSettings(BaseModel):
    """Settings for the HTTP service around the ranking engine."""

    # Server
    HOST: str = Field(default="localhost", description="Bind address, use 0.0.0.0 in staging/prod")
    PORT: int = Field(default=8080, ge=1, le=65535)
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])
    SHUTDOWN_TIMEOUT: int = Field(default=10, ge=0, description="Seconds to let connections drain")

    # Candidate data
    CANDIDATE_SOURCE_TYPE: str = Field(default="json_file")
    CANDIDATE_FILE: Path = Field(default=DEFAULT_CANDIDATE_FILE)

    # Liveness probe
    LIVENESS_FILE: Path = Field(default=Path("/tmp/service-alive"))
    HEARTBEAT_INTERVAL: float = Field(default=4.0, gt=0)

    # Reported by /status/about
    POD_NAME: str = ""

    model_config = {
        "frozen": True
    }

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def split_origins(cls, v):
        if isinstance(v, str):
            return [o.strip() for o in v.split(",") if o.strip()]
        return v


def load_web_settings() -> WebSettings:
    """Build WebSettings from environment variables.

    Raises:
        ConfigurationError: If a variable holds a value of the wrong type
    """
    env_map = {
        "HOST": "SERVER_HOST",
        "PORT": "SERVER_PORT",
        "CORS_ORIGINS": "CORS_ORIGINS",
        "SHUTDOWN_TIMEOUT": "SHUTDOWN_TIMEOUT",
        "CANDIDATE_SOURCE_TYPE": "CANDIDATE_SOURCE_TYPE",
        "CANDIDATE_FILE": "CANDIDATE_FILE",
        "LIVENESS_FILE": "LIVENESS_FILE",
        "HEARTBEAT_INTERVAL": "HEARTBEAT_INTERVAL",
        "POD_NAME": "POD_NAME",
    }
    values = {field: os.environ[var] for field, var in env_map.items() if var in os.environ}

    try:
        return WebSettings(**values)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid web settings",
            details={"fields": [".".join(map(str, err["loc"])) for err in e.errors()]},
            original_error=e,
        ) from e


@lru_cache
def get_settings() -> WebSettings:
    """Cached settings accessor, overridable as a FastAPI dependency."""
    return load_web_settings()
