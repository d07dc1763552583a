# -*- coding: utf-8 -*-
"""
Application configuration.

Values are read from the environment after loading a local `.env` file.
"""

from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000/api")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

_PAGE_SIZE = int(os.getenv("PAGE_SIZE", "10"))

# Delete the freshly created customer when its first address cannot be saved
_COMPENSATE_FAILED_ADDRESS = os.getenv(
    "COMPENSATE_FAILED_ADDRESS", "false"
).lower() in ("true", "1", "yes")

_PROJECT_ROOT = Path(__file__).parent.parent
_LOG_DIR = Path(os.getenv("LOG_DIR", str(_PROJECT_ROOT / "logs")))
_LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
_CONSOLE_LOG_LEVEL = os.getenv("CONSOLE_LOG_LEVEL", "INFO").upper()
_LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024)))
_LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "3"))


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Customer Desk"
    APP_TITLE: str = "Customer Management"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Customer Desk"

    # HTTP API Backend Settings
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL

    # Customer creation
    COMPENSATE_FAILED_ADDRESS: bool = _COMPENSATE_FAILED_ADDRESS

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    LOGS_DIR: Path = _LOG_DIR

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = _LOG_MAX_BYTES
    LOG_BACKUP_COUNT: int = _LOG_BACKUP_COUNT
    LOG_LEVEL: str = _LOG_LEVEL
    CONSOLE_LOG_LEVEL: str = _CONSOLE_LOG_LEVEL
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    CONSOLE_LOG_FORMAT: str = "%(levelname)-8s | %(message)s"

    # UI Settings
    WINDOW_MIN_WIDTH: int = 1100
    WINDOW_MIN_HEIGHT: int = 720
    SIDEBAR_WIDTH: int = 220
    TOAST_DURATION_MS: int = 6000

    # Colors
    PRIMARY_COLOR: str = "#1976D2"
    PRIMARY_DARK: str = "#115293"
    SECONDARY_COLOR: str = "#DC004E"
    TEXT_COLOR: str = "#2C3E50"
    TEXT_LIGHT: str = "#5D6D7E"
    BACKGROUND_COLOR: str = "#F5F5F5"
    CARD_BACKGROUND: str = "#FFFFFF"
    BORDER_COLOR: str = "#D5DCE6"
    SUCCESS_COLOR: str = "#2E7D32"
    WARNING_COLOR: str = "#ED6C02"
    ERROR_COLOR: str = "#D32F2F"
    INFO_COLOR: str = "#0288D1"
    SIDEBAR_BG: str = "#1A365D"
    SIDEBAR_ACTIVE: str = "#2B6CB0"

    # Pagination
    DEFAULT_PAGE_SIZE: int = _PAGE_SIZE

    # Date Formats
    DATE_FORMAT_DISPLAY: str = "%d/%m/%Y"


# Page identifiers
class Pages:
    CUSTOMERS = "customers"
    CUSTOMER_DETAILS = "customer_details"
    CUSTOMER_WIZARD = "customer_wizard"
    ADDRESS_SEARCH = "address_search"
    MULTIPLE_ADDRESSES = "multiple_addresses"
    SINGLE_ADDRESS = "single_address"
