"""Configuration via environment variables."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings


class Mode(str, Enum):
    STANDALONE = "standalone"
    BACKEND = "backend"


class Transport(str, Enum):
    STDIO = "stdio"
    STREAMABLE_HTTP = "streamable-http"


class Settings(BaseSettings):
    model_config = {"env_prefix": "YT_SEARCH_"}

    mode: Mode = Mode.STANDALONE
    backend_url: str = "http://localhost:8300"
    backend_api_key: str = ""
    request_timeout_seconds: float = 60.0
    cache_max_size: int = 100
    cache_ttl_seconds: int = 3600
    rate_limit_per_minute: int = 30
    batch_max_concurrent: int = Field(default=3, ge=1, le=10)
    batch_pacing_seconds: float = Field(default=1.0, ge=0)
    batch_max_urls: int = 50
    log_level: str = "INFO"
    transport: Transport = Transport.STDIO
