"""
config.py — IMT Hasher Configuration
======================================
"""

import os


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """IMT Hasher configuration from environment."""

    HOST: str = os.getenv("IMT_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("IMT_PORT", "8000"))
    LOG_LEVEL: str = os.getenv("IMT_LOG_LEVEL", "INFO")
    FETCH_TIMEOUT: float = float(os.getenv("IMT_FETCH_TIMEOUT", "30"))
    FOLLOW_REDIRECTS: bool = _env_bool("IMT_FOLLOW_REDIRECTS", "true")
    DEFAULT_THROTTLE_MS: int = int(os.getenv("IMT_DEFAULT_THROTTLE_MS", "0"))  # ms
    OUTPUT_DIR: str = os.getenv("IMT_OUTPUT_DIR", "./digests")  # API writes only here


settings = Settings()
