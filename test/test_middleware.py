"""Tests for error handling middleware"""

import json

import pytest
from fastapi import HTTPException

from backend.exceptions import (
  AppError,
  ErrorResponse,
  UnknownStringError,
  get_status_code,
)
from backend.middleware import ErrorHandlingMiddleware, error_handler


def _body(response) -> dict:
  return json.loads(response.body)


@pytest.mark.parametrize(
  "source,status",
  [
    ("validation", 400),
    ("not_found", 404),
    ("rate_limiter", 429),
    ("strings", 500),
    ("backend", 500),
    ("unknown", 500),
  ],
)
def test_status_codes(source, status):
  assert get_status_code(source) == status


class TestErrorHandler:
  def test_app_error(self):
    response = error_handler(
      AppError(description="Screen x not found", name="SCREEN_NOT_FOUND", source="not_found")
    )

    assert response.status_code == 404
    body = _body(response)
    assert ErrorResponse(**body).name == "SCREEN_NOT_FOUND"
    assert body["caused_by"] is None

  def test_unknown_string(self):
    response = error_handler(UnknownStringError("split_bill"))

    assert response.status_code == 500
    body = _body(response)
    assert body["name"] == "UNKNOWN_STRING"
    assert body["source"] == "strings"
    assert body["description"] == "Unknown resource string 'split_bill'"

  def test_http_exception(self):
    response = error_handler(HTTPException(status_code=418, detail="teapot"))

    assert response.status_code == 418
    assert _body(response)["name"] == "HTTP_418"

  def test_value_error(self):
    response = error_handler(ValueError("bad locale"))

    assert response.status_code == 400
    body = _body(response)
    assert body["name"] == "VALIDATION_ERROR"
    assert body["caused_by"] == "ValueError: bad locale"

  def test_unexpected_error(self):
    response = error_handler(RuntimeError("boom"))

    assert response.status_code == 500
    body = _body(response)
    assert body["name"] == "INTERNAL_ERROR"
    assert body["caused_by"].startswith("RuntimeError: boom")


def test_from_exception_keeps_cause():
  error = AppError.from_exception(
    KeyError("nl"), name="LOOKUP", source="strings", context="Lookup failed"
  )
  assert error.description == "Lookup failed: 'nl'"
  assert error.caused_by == "KeyError: 'nl'"


@pytest.mark.asyncio
async def test_middleware_converts_exceptions():
  async def failing_app(scope, receive, send):
    raise AppError(description="nope", name="SCREEN_NOT_FOUND", source="not_found")

  sent = []

  async def receive():
    return {"type": "http.request", "body": b"", "more_body": False}

  async def send(message):
    sent.append(message)

  middleware = ErrorHandlingMiddleware(failing_app)
  scope = {"type": "http", "method": "GET", "path": "/", "headers": []}
  await middleware(scope, receive, send)

  assert sent[0]["type"] == "http.response.start"
  assert sent[0]["status"] == 404
  assert json.loads(sent[1]["body"])["name"] == "SCREEN_NOT_FOUND"


@pytest.mark.asyncio
async def test_middleware_passes_through_non_http():
  calls = []

  async def app(scope, receive, send):
    calls.append(scope["type"])

  await ErrorHandlingMiddleware(app)({"type": "lifespan"}, None, None)

  assert calls == ["lifespan"]
