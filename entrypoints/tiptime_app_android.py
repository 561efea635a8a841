"""Android entrypoint for the packaged Tip Time app.

Injects Android OS interfaces into the shared pywebview+backend bootstrap.
"""

from __future__ import annotations

from entrypoints.tiptime_app_core import run_pywebview_app
from os_interfaces.android import AndroidLocaleProvider
from os_interfaces.base import OSImplementations


def main() -> None:
  os_impl = OSImplementations(locale_provider_cls=AndroidLocaleProvider)
  run_pywebview_app(os_impl=os_impl)


if __name__ == "__main__":
  main()
