"""OS interface module - platform-specific implementations

Since we build separate executables for each platform,
import the appropriate implementation directly in the entry points:
- entrypoints/tiptime_app_linux.py imports from os_interfaces.linux
- entrypoints/tiptime_app_android.py imports from os_interfaces.android
"""

from .base import LocaleProvider, OSImplementations

__all__ = [
  "LocaleProvider",
  "OSImplementations",
]
