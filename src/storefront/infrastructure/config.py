"""Runtime settings, read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# Repo root when installed in editable mode.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_API_URL = "http://localhost:5000/api"
DEFAULT_TIMEOUT = 30.0
UPLOAD_TIMEOUT = 120.0


class ConfigError(Exception):
    """An environment variable holds a value that cannot be used."""


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    data_dir: Path = _DEFAULT_DATA_DIR
    timeout: float = DEFAULT_TIMEOUT
    upload_timeout: float = UPLOAD_TIMEOUT
    login_path: str = "/login"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return Settings(
            api_url=env.get("STOREFRONT_API_URL", DEFAULT_API_URL).rstrip("/"),
            data_dir=Path(env["STOREFRONT_DATA_DIR"]) if env.get("STOREFRONT_DATA_DIR") else _DEFAULT_DATA_DIR,
            timeout=_seconds(env, "STOREFRONT_TIMEOUT", DEFAULT_TIMEOUT),
            upload_timeout=_seconds(env, "STOREFRONT_UPLOAD_TIMEOUT", UPLOAD_TIMEOUT),
            login_path=env.get("STOREFRONT_LOGIN_PATH", "/login"),
        )


def _seconds(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number of seconds, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value
