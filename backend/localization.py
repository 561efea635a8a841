"""
Locale resolution for currency formatting and resource strings.

The active locale is, in order: the TIPTIME_LOCALE override, whatever the
platform's LocaleProvider reports, then AppConfig.FALLBACK_LOCALE.
"""

import logging
from typing import Optional, Union

from babel import Locale, UnknownLocaleError

from backend.config import AppConfig
from os_interfaces.base import LocaleProvider

logger = logging.getLogger(__name__)

LocaleLike = Union[str, Locale]

_locale_provider: Optional[LocaleProvider] = None


def set_locale_provider(provider: Optional[LocaleProvider]) -> None:
  """Install the platform locale provider (done once by the app factory)"""
  global _locale_provider
  _locale_provider = provider


def parse_locale(identifier: LocaleLike) -> Locale:
  """
  Parse a locale identifier such as "en_US", "de-DE" or "sr_Latn_RS"

  Raises:
    ValueError: if the identifier is malformed or unknown to CLDR
  """
  if isinstance(identifier, Locale):
    return identifier

  # Strip POSIX encoding/modifier suffixes ("de_DE.UTF-8@euro")
  cleaned = identifier.strip().split(".")[0].split("@")[0].replace("-", "_")
  try:
    return Locale.parse(cleaned)
  except (UnknownLocaleError, ValueError, TypeError) as e:
    raise ValueError(f"Unknown locale '{identifier}'") from e


def current_locale() -> Locale:
  """Return the locale the app should format for right now"""
  if AppConfig.LOCALE:
    return parse_locale(AppConfig.LOCALE)

  if _locale_provider is not None:
    try:
      identifier = _locale_provider.current_locale()
    except Exception as e:
      logger.warning(f"Locale provider failed, using fallback: {e}")
      identifier = None

    if identifier:
      try:
        return parse_locale(identifier)
      except ValueError as e:
        logger.warning(f"Platform reported {e}, using fallback")

  return parse_locale(AppConfig.FALLBACK_LOCALE)


def resolve_locale(locale: Optional[LocaleLike] = None) -> Locale:
  """Parse `locale` if given, otherwise return the current locale"""
  if locale is None:
    return current_locale()
  return parse_locale(locale)
