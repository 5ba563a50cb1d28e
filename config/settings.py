# config/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_TIMEOUT_S = 30.0


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class Settings:
    """Panelin çalışma zamanı parametreleri (env tabanlı, değişmez)."""

    api_url: str = DEFAULT_API_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    app_name: str = "Predicción de Crímenes"
    log_level: str = "INFO"


def load_settings() -> Settings:
    """PREDICT_API_URL / PREDICT_API_TIMEOUT / APP_NAME / LOG_LEVEL okur; geçersiz süre → varsayılan."""
    return Settings(
        api_url=(os.getenv("PREDICT_API_URL") or DEFAULT_API_URL).rstrip("/"),
        timeout_s=_env_float("PREDICT_API_TIMEOUT", DEFAULT_TIMEOUT_S),
        app_name=os.getenv("APP_NAME", "Predicción de Crímenes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
