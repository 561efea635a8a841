"""Linux entrypoint for the packaged Tip Time app (pywebview shell + backend).

This entrypoint injects Linux OS interface implementations.
"""

from __future__ import annotations

from entrypoints.tiptime_app_core import run_pywebview_app
from os_interfaces.base import OSImplementations
from os_interfaces.linux import LinuxLocaleProvider


def main() -> None:
  os_impl = OSImplementations(locale_provider_cls=LinuxLocaleProvider)
  run_pywebview_app(os_impl=os_impl)


if __name__ == "__main__":
  main()
