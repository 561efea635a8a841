"""
Tip Time Backend - FastAPI server
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse
from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
import logging
from pathlib import Path
from asgi_correlation_id import CorrelationIdFilter

from backend.api.screens import router as screens_router
from backend.api.strings import router as strings_router
from backend.api.tip import router as tip_router
from backend.config import APP_NAME, APP_VERSION, AppConfig
from backend.localization import current_locale, set_locale_provider
from backend.middleware import (
  ErrorHandlingMiddleware,
  rate_limit_exceeded_handler,
  setup_logging_middleware,
  validation_exception_handler,
)
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from slowapi.middleware import SlowAPIMiddleware
from os_interfaces.base import OSImplementations

# Configure logging
logging.basicConfig(
  level=AppConfig.LOG_LEVEL,
  format="%(asctime)s - %(name)s - %(levelname)s [%(correlation_id)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Add correlation ID filter to all handlers
for handler in logging.root.handlers:
  handler.addFilter(CorrelationIdFilter(uuid_length=4))

BUNDLED_FRONTEND = Path(__file__).parent / "frontend"


@asynccontextmanager
async def lifespan(app: FastAPI):
  """Manage application lifecycle"""
  logger.info(f"Starting Tip Time backend (locale {current_locale()})...")
  yield
  logger.info("Shutting down Tip Time backend...")


def _mount_frontend(app: FastAPI, frontend_path: Path) -> None:
  logger.info(f"Serving frontend from: {frontend_path}")

  # Mount static assets (JS, CSS, images, etc.)
  app.mount("/assets", StaticFiles(directory=frontend_path / "assets"), name="assets")

  @app.get("/{full_path:path}", include_in_schema=False)
  async def serve_frontend(full_path: str):
    """Serve frontend files, fallback to index.html"""
    file_path = frontend_path / full_path

    if full_path and file_path.is_file():
      return FileResponse(file_path)

    # Don't cache index.html to prevent serving stale builds
    response = FileResponse(frontend_path / "index.html")
    response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
    response.headers["Pragma"] = "no-cache"
    response.headers["Expires"] = "0"
    return response


def create_app(
  os_impl: Optional[OSImplementations] = None,
  frontend_path: Optional[Path] = None,
) -> FastAPI:
  """
  Build the FastAPI application

  Args:
    os_impl: Platform interfaces; the locale provider is installed from it
    frontend_path: Directory holding index.html and assets/, defaults to
      TIPTIME_FRONTEND_PATH or the bundled frontend
  """
  if os_impl is not None:
    set_locale_provider(os_impl.locale_provider())

  app = FastAPI(
    title="Tip Time",
    description="Tip calculator with localized currency formatting",
    version=APP_VERSION,
    lifespan=lifespan,
    exception_handlers={
      RequestValidationError: validation_exception_handler,
      RateLimitExceeded: rate_limit_exceeded_handler,
    },
  )

  # innermost
  app.add_middleware(ErrorHandlingMiddleware)

  app.add_middleware(
    CORSMiddleware,
    allow_origins=[f"http://{AppConfig.HOST}:{AppConfig.PORT}"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
  )

  limiter = Limiter(key_func=get_remote_address, default_limits=[AppConfig.RATE_LIMIT])
  app.state.limiter = limiter

  app.add_middleware(SlowAPIMiddleware)

  # outermost
  setup_logging_middleware(app)

  app.include_router(screens_router)
  app.include_router(strings_router)
  app.include_router(tip_router)

  @app.get("/health")
  async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": f"{APP_NAME}-backend", "version": APP_VERSION}

  if frontend_path is None:
    frontend_path = Path(AppConfig.FRONTEND_PATH or BUNDLED_FRONTEND)

  if (frontend_path / "index.html").is_file():
    _mount_frontend(app, frontend_path)
  else:
    logger.warning(f"Frontend not found at {frontend_path}. API-only mode.")

    @app.get("/")
    async def root():
      """Root endpoint - API only mode"""
      return {"message": "Tip Time API", "version": APP_VERSION}

  return app


app = create_app()


if __name__ == "__main__":
  uvicorn.run(
    "backend.main:app", host=AppConfig.HOST, port=AppConfig.PORT, log_level="info"
  )
