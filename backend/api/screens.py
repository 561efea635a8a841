"""Tip screen endpoints"""

import logging
from typing import Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from backend.exceptions import AppError
from backend.form import TipForm, TipFormState
from backend.screens import ScreenManager, get_screen_manager
from backend.strings import StringTable, get_string_table

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/screens", tags=["screens"])


class OpenScreenRequest(BaseModel):
  """Request to open a tip screen"""

  locale: Optional[str] = Field(
    default=None, description="Locale such as 'en_US'; the platform locale if omitted"
  )


class TextChange(BaseModel):
  """New contents of a text field, stored verbatim"""

  text: str


def _require_screen(screens: ScreenManager, screen_id: str) -> TipForm:
  form = screens.get_screen(screen_id)
  if form is None:
    raise AppError(
      description=f"Screen {screen_id} not found",
      name="SCREEN_NOT_FOUND",
      source="not_found",
    )
  return form


@router.post("", response_model=TipFormState)
async def open_screen(
  request: Optional[OpenScreenRequest] = None,
  screens: ScreenManager = Depends(get_screen_manager),
  strings: StringTable = Depends(get_string_table),
) -> TipFormState:
  """Open a new screen with empty fields"""
  locale = request.locale if request else None
  try:
    form = screens.create_screen(locale=locale)
  except ValueError as e:
    raise AppError.from_exception(
      e, name="INVALID_LOCALE", source="validation", context="Cannot open screen"
    )
  return form.snapshot(strings)


@router.get("/{screen_id}", response_model=TipFormState)
async def get_screen_state(
  screen_id: str,
  screens: ScreenManager = Depends(get_screen_manager),
  strings: StringTable = Depends(get_string_table),
) -> TipFormState:
  """Current state of a screen"""
  return _require_screen(screens, screen_id).snapshot(strings)


@router.put("/{screen_id}/bill-amount", response_model=TipFormState)
async def set_bill_amount(
  screen_id: str,
  change: TextChange,
  screens: ScreenManager = Depends(get_screen_manager),
  strings: StringTable = Depends(get_string_table),
) -> TipFormState:
  """Replace the bill amount text and return the recomputed state"""
  form = _require_screen(screens, screen_id)
  form.set_bill_amount_text(change.text)
  return form.snapshot(strings)


@router.put("/{screen_id}/tip-percent", response_model=TipFormState)
async def set_tip_percent(
  screen_id: str,
  change: TextChange,
  screens: ScreenManager = Depends(get_screen_manager),
  strings: StringTable = Depends(get_string_table),
) -> TipFormState:
  """Replace the tip percentage text and return the recomputed state"""
  form = _require_screen(screens, screen_id)
  form.set_tip_percent_text(change.text)
  return form.snapshot(strings)


@router.delete("/{screen_id}")
async def close_screen(
  screen_id: str, screens: ScreenManager = Depends(get_screen_manager)
) -> Dict[str, str]:
  """Discard a screen's state when the page is left"""
  if not screens.close_screen(screen_id):
    raise AppError(
      description=f"Screen {screen_id} not found",
      name="SCREEN_NOT_FOUND",
      source="not_found",
    )
  return {"message": "Screen closed", "screen_id": screen_id}
