"""Process settings, read from the environment (and a local .env file)."""

import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    database_url: Optional[str] = None
    admin_edit_key: Optional[str] = None
    store_fallback: str = "startup"
    log_level: str = "INFO"
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    pool_min_size: int = Field(1, ge=0)
    pool_max_size: int = Field(5, ge=1)

    @field_validator("store_fallback")
    @classmethod
    def validate_store_fallback(cls, v):
        v = v.strip().lower()
        if v not in ("startup", "per-call", "off"):
            raise ValueError(f"STORE_FALLBACK must be startup, per-call or off (got {v!r})")
        return v

    @field_validator("admin_edit_key", "database_url")
    @classmethod
    def blank_as_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v

    @property
    def admin_editing_enabled(self) -> bool:
        return self.admin_edit_key is not None

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        origins = os.environ.get("CORS_ORIGINS", "http://localhost:5173")
        return cls(
            database_url=os.environ.get("DATABASE_URL"),
            admin_edit_key=os.environ.get("ADMIN_EDIT_KEY"),
            store_fallback=os.environ.get("STORE_FALLBACK", "startup"),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            pool_min_size=int(os.environ.get("DB_POOL_MIN", "1")),
            pool_max_size=int(os.environ.get("DB_POOL_MAX", "5")),
        )
