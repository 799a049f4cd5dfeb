"""Application configuration — loads .env, then overrides from settings.json."""

import json
import os
from pathlib import Path

from dotenv import load_dotenv

# Find the project root (where .env lives)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

_DATA_DIR = Path(
    os.getenv("BINDERY_DATA_DIR", str(_PROJECT_ROOT / "data"))
)

# Runtime settings file for in-app configuration
_SETTINGS_FILE = _DATA_DIR / "settings.json"


def _load_settings() -> dict:
    """Load saved runtime settings from JSON file."""
    if _SETTINGS_FILE.exists():
        try:
            return json.loads(_SETTINGS_FILE.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            pass
    return {}


def _save_settings(settings: dict):
    """Persist runtime settings to JSON file."""
    _SETTINGS_FILE.parent.mkdir(parents=True, exist_ok=True)
    _SETTINGS_FILE.write_text(
        json.dumps(settings, indent=2), encoding="utf-8"
    )


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


# Load saved settings once at import time
_runtime = _load_settings()


class Config:
    """Central configuration: .env defaults, settings.json overrides."""

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    DATA_DIR: Path = _DATA_DIR
    BACKUP_PATH: Path = Path(
        os.getenv("BINDERY_BACKUP_PATH", str(_DATA_DIR / "backups"))
    )
    BACKUP_KEEP: int = int(os.getenv("BINDERY_BACKUP_KEEP", "10"))

    # Status handling (settings.json overrides .env)
    STRICT_STATUS_TRANSITIONS: bool = _as_bool(_runtime.get(
        "strict_status_transitions",
        os.getenv("STRICT_STATUS_TRANSITIONS", "false"),
    ))

    # Display
    CURRENCY_SYMBOL: str = _runtime.get(
        "currency_symbol",
        os.getenv("CURRENCY_SYMBOL", "$"),
    )

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def update_strict_status(cls, enabled: bool):
        """Toggle guarded status transitions and persist."""
        cls.STRICT_STATUS_TRANSITIONS = enabled
        settings = _load_settings()
        settings["strict_status_transitions"] = enabled
        _save_settings(settings)

    @classmethod
    def update_currency_symbol(cls, symbol: str):
        """Update the display currency symbol and persist."""
        cls.CURRENCY_SYMBOL = symbol
        settings = _load_settings()
        settings["currency_symbol"] = symbol
        _save_settings(settings)
