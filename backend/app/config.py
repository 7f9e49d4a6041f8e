# backend/app/config.py
import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash-preview-05-20"
DEFAULT_GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:3001"


class Settings(BaseModel):
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_api_base: str = DEFAULT_GEMINI_API_BASE
    # When set, the screening routes reach the relay over HTTP instead of in-process.
    relay_url: Optional[str] = None
    static_dir: str = "build"
    cors_origins: List[str] = []
    port: int = 3001
    log_level: str = "INFO"

    @property
    def has_credential(self) -> bool:
        return bool(self.gemini_api_key)

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
            gemini_api_base=os.getenv("GEMINI_API_BASE", DEFAULT_GEMINI_API_BASE).rstrip("/"),
            relay_url=os.getenv("RELAY_URL") or None,
            static_dir=os.getenv("STATIC_DIR", "build"),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            port=int(os.getenv("PORT", "3001")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache
def get_settings() -> Settings:
    """Settings are read from the environment once per process."""
    return Settings.from_env()
