"""Application configuration

Settings are read once from the environment and cached. Tests either build
``Settings`` directly or call ``get_settings(reload=True)`` after patching
the environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from goal_tracker.exceptions import ConfigurationError

_ENV_PREFIX = "GOAL_TRACKER"

# Packaged static assets
_PACKAGE_ROOT = Path(__file__).parent
DEFAULT_STATIC_DIR = _PACKAGE_ROOT / "public"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEVELOPMENT = "development"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the web server."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    environment: Optional[str] = None
    static_dir: Path = DEFAULT_STATIC_DIR

    @property
    def is_development(self) -> bool:
        """Stack traces are only disclosed when the mode is exactly 'development'."""
        return self.environment == DEVELOPMENT

    @property
    def environment_label(self) -> str:
        """Mode shown in the startup banner; unset reads as development."""
        return self.environment or DEVELOPMENT

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env_map = os.environ if env is None else env

        raw_port = env_map.get("PORT", "").strip() or str(DEFAULT_PORT)
        try:
            port = int(raw_port)
        except ValueError as e:
            raise ConfigurationError(
                f"PORT must be an integer, got {raw_port!r}",
                details={"variable": "PORT", "value": raw_port},
            ) from e
        if not 0 <= port <= 65535:
            raise ConfigurationError(
                f"PORT must be between 0 and 65535, got {port}",
                details={"variable": "PORT", "value": raw_port},
            )

        static_dir = env_map.get(f"{_ENV_PREFIX}_STATIC_DIR")

        return cls(
            host=env_map.get("HOST", "").strip() or DEFAULT_HOST,
            port=port,
            environment=env_map.get("APP_ENV") or None,
            static_dir=Path(static_dir) if static_dir else DEFAULT_STATIC_DIR,
        )


_settings: Optional[Settings] = None


def get_settings(reload: bool = False) -> Settings:
    """Get settings from the environment, cached after the first call"""
    global _settings
    if _settings is None or reload:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment"""
    global _settings
    _settings = None


__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "DEFAULT_STATIC_DIR",
    "DEFAULT_PORT",
    "DEVELOPMENT",
]
