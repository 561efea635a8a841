"""Tests for OS interfaces"""

import importlib
import sys
from unittest.mock import MagicMock, patch

import pytest

from os_interfaces.base import LocaleProvider, OSImplementations
from os_interfaces.linux import LinuxLocaleProvider


class TestLinuxLocaleProvider:
  @patch("os_interfaces.linux.default_locale")
  def test_reads_monetary_category(self, mock_default_locale):
    mock_default_locale.return_value = "fr_FR"

    provider = LinuxLocaleProvider()

    assert provider.current_locale() == "fr_FR"
    mock_default_locale.assert_called_once_with("LC_MONETARY")

  def test_environment(self, monkeypatch):
    for name in ("LANGUAGE", "LC_ALL", "LC_CTYPE", "LANG"):
      monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LC_MONETARY", "de_DE.UTF-8")

    assert LinuxLocaleProvider().current_locale() == "de_DE"

  @patch("os_interfaces.linux.default_locale", return_value=None)
  def test_no_locale(self, _mock_default_locale):
    assert LinuxLocaleProvider().current_locale() is None


class TestAndroidLocaleProvider:
  @pytest.fixture
  def android(self):
    """Import os_interfaces.android against a stand-in for PyJNIus"""
    jnius = MagicMock()
    java_locale = jnius.autoclass.return_value
    sys.modules.pop("os_interfaces.android", None)
    with patch.dict(sys.modules, {"jnius": jnius}):
      module = importlib.import_module("os_interfaces.android")
      yield module, java_locale
    sys.modules.pop("os_interfaces.android", None)

  def test_device_locale(self, android):
    module, java_locale = android
    java_locale.getDefault.return_value.toLanguageTag.return_value = "pt-BR"

    assert module.AndroidLocaleProvider().current_locale() == "pt-BR"

  def test_undetermined_locale(self, android):
    module, java_locale = android
    java_locale.getDefault.return_value.toLanguageTag.return_value = "und"

    assert module.AndroidLocaleProvider().current_locale() is None

  def test_autoclass_target(self, android):
    module, _ = android
    sys.modules["jnius"].autoclass.assert_called_with("java.util.Locale")


def test_os_implementations_builds_provider():
  os_impl = OSImplementations(locale_provider_cls=LinuxLocaleProvider)

  provider = os_impl.locale_provider()

  assert isinstance(provider, LocaleProvider)
  assert isinstance(provider, LinuxLocaleProvider)
