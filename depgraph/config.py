"""
Runtime configuration.

Uses Pydantic Settings: values come from the environment or a .env
file in the working directory. OPENAI_API_KEY is read from the same
place.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .imports import SOURCE_EXTENSIONS


class Settings(BaseSettings):
    """Settings for scanning, analysis and serving."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Scanning
    project_root: str = "."
    source_dirs: List[str] = ["src"]
    source_extensions: List[str] = list(SOURCE_EXTENSIONS)
    # Module identifiers never analysed (the tool's own files)
    exclude: List[str] = []

    # Heuristics
    hub_threshold: int = 3

    # Semantic analyzer
    openai_api_key: str = ""
    openai_base_url: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    llm_timeout_sec: float = 60.0
    llm_temperature: float = 0.2
    llm_max_tokens: int = 8192

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    warm_on_startup: bool = True

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
