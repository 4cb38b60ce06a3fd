"""Environment-driven settings for the backend connection and logging."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class ToolscoutSettings(BaseSettings):
    """Configuration settings for toolscout (env prefix TOOLSCOUT_)."""

    supabase_url: str = "http://127.0.0.1:54321"
    supabase_key: str = ""  # anon key, sent as apikey + bearer token
    request_timeout: float = 10.0
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    vocabulary: Optional[Path] = None  # optional YAML override of keyword tables
    audit_log_dir: Optional[str] = None  # enables the JSONL search audit trail

    model_config = SettingsConfigDict(env_prefix="TOOLSCOUT_")
