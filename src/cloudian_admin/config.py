from __future__ import annotations

import os

from dotenv import load_dotenv

from .client import DEFAULT_USERNAME, ClientConfig, CloudianClient

_FALSY = {"0", "false", "no", "off"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from exc


def load_env_config(*, use_dotenv: bool = True) -> ClientConfig:
    """Load Cloudian Admin API settings from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    return ClientConfig(
        base_url=os.getenv("CLOUDIAN_BASE_URL", "").strip(),
        password=os.getenv("CLOUDIAN_PASSWORD", "").strip(),
        username=os.getenv("CLOUDIAN_USERNAME", "").strip() or DEFAULT_USERNAME,
        timeout_seconds=_env_float("CLOUDIAN_TIMEOUT_SECONDS", 10.0),
        verify_tls=os.getenv("CLOUDIAN_VERIFY_TLS", "true").strip().lower()
        not in _FALSY,
    )


def create_client_from_env(**kwargs) -> CloudianClient:
    """Create a CloudianClient from environment variables."""
    config = load_env_config()
    if not config.base_url or not config.password:
        raise ValueError(
            "Missing CLOUDIAN_BASE_URL or CLOUDIAN_PASSWORD in environment."
        )
    return CloudianClient.from_config(config, **kwargs)


__all__ = ["load_env_config", "create_client_from_env"]
