"""Resource string endpoints"""

import logging
from typing import Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from backend.exceptions import AppError
from backend.localization import resolve_locale
from backend.strings import StringTable, get_string_table

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/strings", tags=["strings"])


class StringsResponse(BaseModel):
  locale: str
  strings: Dict[str, str]


@router.get("", response_model=StringsResponse)
async def get_strings(
  locale: Optional[str] = None, table: StringTable = Depends(get_string_table)
) -> StringsResponse:
  """All UI strings resolved for a locale (the platform locale if omitted)"""
  try:
    resolved = resolve_locale(locale)
  except ValueError as e:
    raise AppError.from_exception(
      e, name="INVALID_LOCALE", source="validation", context="Cannot load strings"
    )
  return StringsResponse(locale=str(resolved), strings=table.all_strings(resolved))
