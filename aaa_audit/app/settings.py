from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import List

from aaa_audit.app.errors import ConfigError

_TRUTHY = {"1", "true", "yes", "y", "on"}
_MB = 1024 * 1024


def _get_env(name: str, default: str | None = None) -> str:
    v = os.getenv(name, default)
    if v is None or v == "":
        raise ConfigError(f"Missing required env var: {name}")
    return v


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.lower().strip() in _TRUTHY


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"Env var {name} must be an integer, got {raw!r}") from e


def _get_optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return _get_int(name, 0)


@dataclass(frozen=True)
class Settings:
    # Server
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    # Uploads
    upload_dir: str = "uploads"
    max_upload_bytes: int = 50 * _MB
    max_image_bytes: int = 5 * _MB

    # Auditing
    conformance_level: str = "AAA"
    template_seed: int | None = None

    # Mongo (report storage)
    mongo_uri: str | None = None
    mongo_db: str = "aaa_accessibility"
    mongo_tls: bool = False

    # Cerebras (text simplification)
    cerebras_api_key: str | None = None
    cerebras_model: str = "llama3.1-8b"

    # Gemini (image description, transcription)
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"


def load_settings() -> Settings:
    level = os.getenv("CONFORMANCE_LEVEL", "AAA").upper().strip()
    if level not in {"AA", "AAA"}:
        raise ConfigError(f"CONFORMANCE_LEVEL must be AA or AAA, got {level!r}")

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_get_int("PORT", 5000),
        cors_origins=origins or ["*"],
        upload_dir=_get_env("UPLOAD_DIR", "uploads"),
        max_upload_bytes=_get_int("MAX_UPLOAD_MB", 50) * _MB,
        max_image_bytes=_get_int("MAX_IMAGE_MB", 5) * _MB,
        conformance_level=level,
        template_seed=_get_optional_int("TEMPLATE_SEED"),
        mongo_uri=os.getenv("MONGO_URI") or None,
        mongo_db=_get_env("MONGO_DB", "aaa_accessibility"),
        mongo_tls=_get_bool("MONGO_TLS", False),
        cerebras_api_key=os.getenv("CEREBRAS_API_KEY") or None,
        cerebras_model=os.getenv("CEREBRAS_MODEL", "llama3.1-8b"),
        gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
    )
