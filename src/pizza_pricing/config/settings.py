"""
Centralized settings and path configuration for the pizza pricing tool.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


ENV_PREFIX = "PIZZA_PRICING_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    # Walk up from this file to find the project root
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 4 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


def _env_log_level(name: str, default: str) -> str:
    """Read a log level name from the environment; unknown names fall back to the default."""
    value = os.environ.get(f"{ENV_PREFIX}{name}", default).strip().upper()
    return value if value in LOG_LEVELS else default


def _env_port(name: str, default: int) -> int:
    """Read a TCP port from the environment; anything not in 1-65535 falls back to the default."""
    try:
        port = int(os.environ.get(f"{ENV_PREFIX}{name}", default))
    except ValueError:
        return default
    return port if 0 < port < 65536 else default


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path

    # Output files
    receipts_dir: Path

    log_level: str = "INFO"

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Streamlit page
    ui_port: int = 8501

    @classmethod
    def load(cls, project_root: Optional[Path] = None) -> 'Settings':
        """Load settings from the project structure, then apply environment overrides."""
        root = project_root or get_project_root()

        receipts_dir = os.environ.get(f"{ENV_PREFIX}RECEIPTS_DIR")

        return cls(
            project_root=root,
            receipts_dir=Path(receipts_dir) if receipts_dir else root / 'outputs' / 'receipts',
            log_level=_env_log_level("LOG_LEVEL", "INFO"),
            api_host=os.environ.get(f"{ENV_PREFIX}API_HOST", "0.0.0.0"),
            api_port=_env_port("API_PORT", 8000),
            ui_port=_env_port("UI_PORT", 8501),
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
