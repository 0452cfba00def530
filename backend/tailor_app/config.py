import os
from typing import Optional

from pydantic import BaseModel

DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_RESUME_PATH = "original-resume.md"
DEFAULT_TIMEOUT_SECONDS = 20.0


def _env_flag(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Per-request view of the process environment."""

    openai_api_key: Optional[str] = None
    openai_base_url: str = DEFAULT_OPENAI_BASE_URL
    model: str = DEFAULT_MODEL
    resume_path: str = DEFAULT_RESUME_PATH
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS
    # Reject parseable model output that does not match the resume schema
    strict_schema: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_base_url=os.getenv("OPENAI_BASE_URL") or DEFAULT_OPENAI_BASE_URL,
            model=os.getenv("OPENAI_MODEL") or DEFAULT_MODEL,
            resume_path=os.getenv("RESUME_PATH") or DEFAULT_RESUME_PATH,
            request_timeout=float(os.getenv("GENERATION_TIMEOUT_SECONDS") or DEFAULT_TIMEOUT_SECONDS),
            strict_schema=_env_flag("STRICT_RESUME_SCHEMA"),
        )


def get_settings() -> Settings:
    # Re-read on every call so a missing key is caught per request
    return Settings.from_env()
