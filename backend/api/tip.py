"""Stateless tip calculation endpoint"""

from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel, field_serializer

from backend.exceptions import AppError
from backend.form import json_number
from backend.localization import resolve_locale
from backend.tip import calculate_tip, compute_tip, currency_for_locale

router = APIRouter(prefix="/api/tip", tags=["tip"])


class TipResponse(BaseModel):
  amount: float
  tip_percent: float
  tip_amount: float
  currency: str
  locale: str
  formatted_tip: str

  @field_serializer("tip_amount", when_used="json")
  def serialize_tip_amount(self, value: float) -> float | str:
    return json_number(value)


@router.get("", response_model=TipResponse)
async def get_tip(
  amount: float = Query(..., ge=0, allow_inf_nan=False),
  tip_percent: float = Query(..., ge=0, allow_inf_nan=False),
  locale: Optional[str] = None,
) -> TipResponse:
  """Calculate and format a tip without opening a screen"""
  try:
    resolved = resolve_locale(locale)
  except ValueError as e:
    raise AppError.from_exception(
      e, name="INVALID_LOCALE", source="validation", context="Cannot format tip"
    )

  return TipResponse(
    amount=amount,
    tip_percent=tip_percent,
    tip_amount=compute_tip(amount, tip_percent),
    currency=currency_for_locale(resolved),
    locale=str(resolved),
    formatted_tip=calculate_tip(amount, tip_percent, resolved),
  )
