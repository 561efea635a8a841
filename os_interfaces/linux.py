"""Linux-specific implementations of OS interfaces"""

import logging
from typing import Optional

from babel import default_locale

from .base import LocaleProvider

logger = logging.getLogger(__name__)


class LinuxLocaleProvider(LocaleProvider):
  """Reads the POSIX locale environment (LC_MONETARY, LC_ALL, LANG, ...)"""

  def __init__(self, category: str = "LC_MONETARY"):
    self.category = category

  def current_locale(self) -> Optional[str]:
    identifier = default_locale(self.category)
    logger.debug(f"Environment locale for {self.category}: {identifier}")
    return identifier
