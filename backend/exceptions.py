"""
Custom exceptions for the Tip Time backend
"""

from typing import Literal, Optional, cast
from pydantic import BaseModel, Field


# All possible error sources in the application
ErrorSource = Literal[
  "rate_limiter",  # Rate limiting middleware
  "validation",  # Request validation errors
  "not_found",  # Unknown screen or resource
  "strings",  # Resource string lookup
  "backend",  # General backend API errors
  "http",  # HTTP protocol errors
  "unknown",  # Uncategorized errors
]


def get_status_code(source: ErrorSource) -> int:
  """Determine HTTP status code based on error source"""
  if source == "rate_limiter":
    return 429  # Too Many Requests
  elif source == "validation":
    return 400  # Bad Request
  elif source == "not_found":
    return 404
  else:
    return 500  # Internal Server Error


class ErrorResponse(BaseModel):
  """Standardized error response model"""

  description: str = Field(..., description="Human-readable error message")
  name: str = Field(..., description="Unique error identifier")
  source: ErrorSource = Field(..., description="Where the error originated")
  caused_by: Optional[str] = Field(
    None, description="Original error details if this is a chained error"
  )


class AppError(Exception):
  """
  Application error with a stable name and source.
  All errors reaching the HTTP layer are converted to this format.
  """

  def __init__(
    self,
    description: str,
    name: str,
    source: ErrorSource,
    caused_by: Optional[str] = None,
  ):
    """
    Args:
        description: Human-readable error message
        name: Unique error identifier (e.g., "SCREEN_NOT_FOUND")
        source: Where the error originated from
        caused_by: Original error details if this wraps another error
    """
    self.description: str = description
    self.name: str = name
    self.source: ErrorSource = source
    self.caused_by: Optional[str] = caused_by
    super().__init__(description)

  def to_response(self) -> ErrorResponse:
    """Convert to ErrorResponse model for API responses"""
    return ErrorResponse(
      description=self.description,
      name=self.name,
      source=cast(ErrorSource, self.source),
      caused_by=self.caused_by,
    )

  @classmethod
  def from_exception(
    cls,
    e: Exception,
    name: str,
    source: ErrorSource,
    context: Optional[str] = None,
  ) -> "AppError":
    """
    Create an AppError from an existing exception, keeping its details
    in `caused_by`.
    """
    original_msg = str(e)
    description = f"{context}: {original_msg}" if context else original_msg

    return cls(
      description=description,
      name=name,
      source=source,
      caused_by=f"{e.__class__.__name__}: {original_msg}",
    )


class UnknownStringError(KeyError):
  """Raised when a resource string identifier does not exist"""

  def __init__(self, string_id: str):
    self.string_id = string_id
    super().__init__(string_id)

  def __str__(self) -> str:
    return f"Unknown resource string '{self.string_id}'"
