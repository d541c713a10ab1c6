# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_DRAFTS_DIR = os.getenv("DRAFTS_DIR", None)
_AUTOSAVE_ENABLED = os.getenv("AUTOSAVE_ENABLED", "true").lower() in ("true", "1", "yes")
_MAX_SERVICE_COST = float(os.getenv("MAX_SERVICE_COST", "99999.99"))
_MAX_ODOMETER = int(os.getenv("MAX_ODOMETER", "2000000"))
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Vehicle Maintenance Log"
    APP_TITLE: str = "Vehicle Maintenance Log - Service Entry"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Bavarium"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    DRAFTS_DIR: Path = Path(_DRAFTS_DIR) if _DRAFTS_DIR else DATA_DIR / "drafts"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_CONSOLE_LEVEL: str = _LOG_LEVEL

    # Wizard drafts
    AUTOSAVE_ENABLED: bool = _AUTOSAVE_ENABLED
    DRAFT_FILE_SUFFIX: str = ".draft.json"

    # Validation bounds
    MAX_ODOMETER: int = _MAX_ODOMETER
    MAX_SERVICE_COST: float = _MAX_SERVICE_COST
    SHOP_NAME_MIN_LENGTH: int = 2
    SHOP_NAME_MAX_LENGTH: int = 100
    NOTES_MAX_LENGTH: int = 1000
    SHOP_ADDRESS_MAX_LENGTH: int = 200
    MAX_PHOTOS: int = 10

    # UI Settings
    WINDOW_MIN_WIDTH: int = 720
    WINDOW_MIN_HEIGHT: int = 640

    # Branding Colors
    PRIMARY_COLOR: str = "#0d6efd"
    SECONDARY_COLOR: str = "#6c757d"
    ERROR_COLOR: str = "#dc3545"
    BACKGROUND_COLOR: str = "#f8f9fa"
    BORDER_COLOR: str = "#dee2e6"


class Pages:
    """Wizard screens launched from the entry point."""
    DIY_SERVICE = "diy"
    SHOP_SERVICE = "shop"
