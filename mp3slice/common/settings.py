# mp3slice/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from mp3slice.common.strings.splitters import csv_to_list
from mp3slice.domain.enums.probe_window import ProbeWindow


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False


class HTTPConfig(BaseModel):
    timeout_sec: float = 30.0
    user_agent: str = "mp3slice/0.1"
    chunk_size: int = Field(64 * 1024, ge=1024, description="Streaming chunk size in bytes")


class SlicingConfig(BaseModel):
    # CSV of ProbeWindow values, tried in order until a header is found.
    probe_windows: str = Field("head", description="e.g. 'head' or 'head,skip_metadata'")
    clamp_to_content_length: bool = False

    @field_validator("clamp_to_content_length", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    @field_validator("probe_windows", mode="before")
    @classmethod
    def _check_windows(cls, v):
        names = csv_to_list(v)
        if not names:
            raise ValueError("probe_windows must name at least one window")
        for n in names:
            ProbeWindow(n.lower())  # raises ValueError on unknown names
        return ",".join(n.lower() for n in names)

    @property
    def windows(self) -> List[ProbeWindow]:
        return [ProbeWindow(n) for n in csv_to_list(self.probe_windows)]


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "mp3slice"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Output --------
    output_root: Path = Path("./slices")

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    http: HTTPConfig = HTTPConfig()
    slicing: SlicingConfig = SlicingConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from mp3slice.common.settings import get_settings
        cfg = get_settings()
    """
    s = Settings()  # pydantic_settings will read from .env automatically
    if s.app_env in ("development", "test"):
        s.output_root.mkdir(parents=True, exist_ok=True)
    return s
