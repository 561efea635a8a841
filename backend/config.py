"""
Configuration module for Tip Time
Reads settings from the environment (and an optional .env file)
"""

import os
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()

APP_NAME = "tiptime"
APP_VERSION = "0.1.0"


def _env_flag(name: str) -> bool:
  return os.getenv(name, "").strip().lower() in {"1", "true", "yes"}


class AppConfig:
  """Application configuration settings"""

  # Server settings
  HOST = os.getenv("TIPTIME_HOST", "127.0.0.1")
  PORT = int(os.getenv("TIPTIME_PORT", "8000"))

  # Locale settings
  # None means "ask the platform"
  LOCALE = os.getenv("TIPTIME_LOCALE") or None
  FALLBACK_LOCALE = "en_US"
  DEFAULT_CURRENCY = os.getenv("TIPTIME_DEFAULT_CURRENCY", "USD")

  # Screen settings
  MAX_OPEN_SCREENS = int(os.getenv("TIPTIME_MAX_OPEN_SCREENS", "32"))

  # Every keystroke is one request
  RATE_LIMIT = os.getenv("TIPTIME_RATE_LIMIT", "20000/hour")

  # Frontend / webview
  FRONTEND_PATH = os.getenv("TIPTIME_FRONTEND_PATH")
  WEBVIEW_DEBUG = _env_flag("TIPTIME_WEBVIEW_DEBUG")

  # Logging
  LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
