"""
Open screens
Each loaded page owns one TipForm; it is dropped when the page goes away
"""

import logging
from collections import OrderedDict
from threading import Lock
from typing import List, Optional

from backend.config import AppConfig
from backend.form import TipForm
from backend.localization import LocaleLike

logger = logging.getLogger(__name__)


class ScreenManager:
  """In-memory registry of open tip screens, least recently used first"""

  def __init__(self, max_screens: Optional[int] = None):
    self.max_screens = max_screens or AppConfig.MAX_OPEN_SCREENS
    self.screens: "OrderedDict[str, TipForm]" = OrderedDict()
    self.lock = Lock()

  def create_screen(self, locale: Optional[LocaleLike] = None) -> TipForm:
    """
    Open a new screen with empty texts

    Args:
      locale: Locale to format for, defaults to the current locale

    Returns:
      The new TipForm
    """
    form = TipForm(locale=locale)

    with self.lock:
      self.screens[form.screen_id] = form
      while len(self.screens) > self.max_screens:
        evicted_id, _ = self.screens.popitem(last=False)
        logger.info(f"Evicted least recently used screen {evicted_id[:8]}")

    logger.info(f"Opened screen {form.screen_id[:8]} ({form.locale})")
    return form

  def get_screen(self, screen_id: str) -> Optional[TipForm]:
    """Return the screen's form, or None if it is not open"""
    with self.lock:
      form = self.screens.get(screen_id)
      if form is not None:
        self.screens.move_to_end(screen_id)
      return form

  def close_screen(self, screen_id: str) -> bool:
    """
    Discard a screen's state

    Returns:
      True if the screen was open
    """
    with self.lock:
      form = self.screens.pop(screen_id, None)

    if form is None:
      return False

    logger.info(f"Closed screen {screen_id[:8]}")
    return True

  def list_screens(self) -> List[str]:
    """Ids of open screens, least recently used first"""
    with self.lock:
      return list(self.screens.keys())


# Singleton instance
_screen_manager: Optional[ScreenManager] = None


def get_screen_manager() -> ScreenManager:
  """Get or create the singleton screen manager"""
  global _screen_manager

  if _screen_manager is None:
    _screen_manager = ScreenManager()

  return _screen_manager
