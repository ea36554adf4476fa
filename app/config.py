"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]


def load_env_files(project_root: Path = _PROJECT_ROOT) -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """
    Read a comma-separated list from environment variables with fallback.
    """

    raw_value = _get_str_env(name, "")
    if not raw_value:
        return default
    items = tuple(item.strip() for item in raw_value.split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class ServerSettings:
    """
    Runtime settings for the HTTP backend.
    """

    host: str = "0.0.0.0"
    port: int = 7860
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)
    seed_demo_data: bool = True


@dataclass(frozen=True)
class DashboardSettings:
    """
    Settings for the Streamlit dashboard and its backend client.
    """

    api_base_url: str = "http://127.0.0.1:7860/api"
    vendor_id: str = "v1"
    request_timeout_seconds: float = 10.0


@lru_cache(maxsize=1)
def get_server_settings() -> ServerSettings:
    """
    Return cached backend settings from environment variables.
    """

    port = _get_int_env("PORT", 7860)
    return ServerSettings(
        host=_get_str_env("APP_HOST", "0.0.0.0"),
        port=port if 0 < port < 65536 else 7860,
        log_level=_get_str_env("LOG_LEVEL", "INFO").upper(),
        cors_origins=_get_list_env("CORS_ALLOW_ORIGINS", ("*",)),
        seed_demo_data=_get_bool_env("SEED_DEMO_DATA", True),
    )


@lru_cache(maxsize=1)
def get_dashboard_settings() -> DashboardSettings:
    """
    Return cached dashboard settings from environment variables.
    """

    return DashboardSettings(
        api_base_url=_get_str_env("DASHBOARD_API_BASE_URL", "http://127.0.0.1:7860/api").rstrip("/"),
        vendor_id=_get_str_env("DASHBOARD_VENDOR_ID", "v1"),
        request_timeout_seconds=max(1.0, _get_float_env("DASHBOARD_TIMEOUT_SECONDS", 10.0)),
    )
