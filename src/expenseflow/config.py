"""Shared configuration for ExpenseFlow."""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

# Agent that handles both expense processing and policy Q&A
DEFAULT_AGENT_ID = "696f6413b50537828e0b1654"


class ExpenseFlowSettings(BaseSettings):
    """Application-wide settings."""

    # Remote agent inference endpoint and asset upload endpoint
    AGENT_API_URL: str = "http://localhost:8000/api/agent"
    UPLOAD_API_URL: str = "http://localhost:8000/api/upload"
    AGENT_API_KEY: Optional[str] = None  # sent as x-api-key when set
    AGENT_ID: str = DEFAULT_AGENT_ID

    # Seconds; None waits for the request to settle
    REQUEST_TIMEOUT: Optional[float] = None

    MAX_UPLOAD_SIZE: int = 10485760

    LOG_LEVEL: str = "INFO"  # DEBUG | INFO | WARNING | ERROR
    LOG_FILE: Optional[str] = None

    # Show raw agent envelopes in the UI
    DEBUG: bool = False

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


@lru_cache
def get_settings() -> ExpenseFlowSettings:
    return ExpenseFlowSettings()
