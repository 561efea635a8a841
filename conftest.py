"""Shared pytest fixtures"""

import pytest
from fastapi.testclient import TestClient

from backend.config import AppConfig
from backend.localization import set_locale_provider
from backend.main import create_app
from backend.screens import ScreenManager, get_screen_manager
from backend.strings import get_string_table


@pytest.fixture(autouse=True)
def us_locale(monkeypatch):
  """Pin formatting to en_US unless a test asks otherwise"""
  monkeypatch.setattr(AppConfig, "LOCALE", None)
  monkeypatch.setattr(AppConfig, "FALLBACK_LOCALE", "en_US")
  monkeypatch.setattr(AppConfig, "DEFAULT_CURRENCY", "USD")
  set_locale_provider(None)
  yield
  set_locale_provider(None)


@pytest.fixture
def strings():
  return get_string_table()


@pytest.fixture
def screen_manager():
  return ScreenManager(max_screens=8)


@pytest.fixture
def client(screen_manager):
  """Test client over a fresh app with its own screen registry"""
  app = create_app()
  app.dependency_overrides[get_screen_manager] = lambda: screen_manager
  with TestClient(app) as test_client:
    yield test_client
