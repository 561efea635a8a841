"""Android-specific implementations of OS interfaces."""

from __future__ import annotations

import logging

from jnius import autoclass  # type: ignore

from .base import LocaleProvider

logger = logging.getLogger(__name__)


# --- PyJNIus handles ---
JavaLocale = autoclass("java.util.Locale")


class AndroidLocaleProvider(LocaleProvider):
  """Reports the device locale from java.util.Locale.getDefault()."""

  def current_locale(self) -> str | None:
    tag = JavaLocale.getDefault().toLanguageTag()
    # "und" is the undetermined locale
    if not tag or tag == "und":
      return None
    logger.debug("Device locale: %s", tag)
    return tag
