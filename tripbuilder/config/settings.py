"""Runtime settings snapshot resolved from the environment."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}
DEFAULT_CATALOG_DIR = Path(__file__).resolve().parents[1] / "data"


def _is_enabled(value: str | None) -> bool:
    return bool(value and value.strip().lower() in _TRUTHY)


def resolve_catalog_dir() -> Path:
    raw = str(os.getenv("CATALOG_DIR") or "").strip()
    if not raw:
        return DEFAULT_CATALOG_DIR
    return Path(raw).expanduser()


def resolve_cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    origins = [item.strip() for item in raw.split(",") if item.strip()]
    return origins or ["*"]


class AppSettings(BaseModel):
    catalog_dir: Path = Field(default=DEFAULT_CATALOG_DIR)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    enable_docs: bool = Field(default=False)
    log_level: str = Field(default="INFO")


def resolve_settings() -> AppSettings:
    return AppSettings(
        catalog_dir=resolve_catalog_dir(),
        cors_origins=resolve_cors_origins(),
        enable_docs=_is_enabled(os.getenv("ENABLE_DOCS")),
        log_level=str(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )


__all__ = ["AppSettings", "DEFAULT_CATALOG_DIR", "resolve_catalog_dir", "resolve_settings"]
