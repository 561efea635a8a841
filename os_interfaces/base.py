"""Abstract base classes for OS-specific interfaces"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class LocaleProvider(ABC):
  """Abstract base class for discovering the user's locale"""

  @abstractmethod
  def current_locale(self) -> Optional[str]:
    """Return the platform locale identifier

    Returns:
      An identifier such as "en_US" or "de-DE", or None if the platform
      does not report one
    """
    raise NotImplementedError


@dataclass
class OSImplementations:
  """Bundle of platform implementations injected by the entrypoints"""

  locale_provider_cls: type[LocaleProvider]

  def locale_provider(self) -> LocaleProvider:
    return self.locale_provider_cls()
