"""Platform-agnostic pywebview app bootstrap.

The Linux and Android entrypoints build an `OSImplementations` bundle and hand
it to `run_pywebview_app`, which serves the backend from a thread of this
process and shows it in a webview window. Closing the window stops the server.
"""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Optional

import uvicorn
import webview
from platformdirs import user_cache_dir

from backend.config import APP_NAME, AppConfig
from os_interfaces.base import OSImplementations

logging.basicConfig(
  level=logging.DEBUG if AppConfig.WEBVIEW_DEBUG else AppConfig.LOG_LEVEL,
  format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class BackendThread(threading.Thread):
  """Runs the FastAPI app under uvicorn until `stop()` is called"""

  def __init__(self, os_impl: OSImplementations, frontend_path: Optional[Path]):
    super().__init__(name="FastAPI-Backend", daemon=True)
    from backend.main import create_app

    config = uvicorn.Config(
      create_app(os_impl=os_impl, frontend_path=frontend_path),
      host=AppConfig.HOST,
      port=AppConfig.PORT,
      log_level=AppConfig.LOG_LEVEL.lower(),
      access_log=False,
    )
    self.server = uvicorn.Server(config)

  def run(self) -> None:
    logger.info("Serving backend on %s:%s", AppConfig.HOST, AppConfig.PORT)
    self.server.run()

  def wait_until_started(self, timeout: float = 10) -> bool:
    deadline = time.monotonic() + timeout
    while not self.server.started:
      if not self.is_alive() or time.monotonic() > deadline:
        return False
      time.sleep(0.05)
    return True

  def stop(self) -> None:
    self.server.should_exit = True
    self.join(timeout=5)


def run_pywebview_app(
  *, os_impl: OSImplementations, frontend_path: Optional[Path] = None
) -> None:
  if frontend_path is not None and not frontend_path.exists():
    raise FileNotFoundError(f"Frontend path does not exist: {frontend_path}")

  backend = BackendThread(os_impl, frontend_path)
  backend.start()

  if not backend.wait_until_started():
    raise RuntimeError("Backend failed to start")

  webview.create_window(
    title="Tip Time",
    url=f"http://{AppConfig.HOST}:{AppConfig.PORT}/?v={int(time.time())}",
    width=420,
    height=760,
    min_size=(320, 480),
  )

  webview.start(
    debug=AppConfig.WEBVIEW_DEBUG,
    private_mode=False,
    storage_path=user_cache_dir(APP_NAME, ensure_exists=True),
  )

  logger.info("Window closed, stopping backend")
  backend.stop()
