"""
Form state for the tip screen.

Holds the two raw texts the user typed and derives everything else from them
on every read. Bad input is never an error: text that is not a non-negative
finite decimal counts as 0.
"""

import math
import re
import uuid
from typing import Callable, List, Optional

from babel import Locale
from pydantic import BaseModel, field_serializer

from backend.localization import LocaleLike, resolve_locale
from backend.strings import StringTable
from backend.tip import calculate_tip, compute_tip, currency_for_locale

DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def json_number(value: float) -> float | str:
  """JSON has no infinity, so an overflowing tip goes out as the string "Infinity"."""
  return value if math.isfinite(value) else "Infinity"


def parse_decimal_text(text: str) -> float:
  """Parse user text as a non-negative decimal, 0.0 when that fails"""
  stripped = text.strip()
  if not DECIMAL_PATTERN.fullmatch(stripped):
    return 0.0

  value = float(stripped)
  if not math.isfinite(value) or value < 0:
    return 0.0
  # Avoid "-0"
  return value + 0.0


class TipFormState(BaseModel):
  """Snapshot of one screen, as rendered by the page"""

  screen_id: str
  locale: str
  currency: str
  bill_amount_text: str
  tip_percent_text: str
  amount: float
  tip_percent: float
  tip_amount: float
  formatted_tip: str
  tip_amount_text: str

  @field_serializer("tip_amount", when_used="json")
  def serialize_tip_amount(self, value: float) -> float | str:
    return json_number(value)


class TipForm:
  """Reactive form state for one tip screen"""

  def __init__(
    self, locale: Optional[LocaleLike] = None, screen_id: Optional[str] = None
  ):
    self.screen_id = screen_id or uuid.uuid4().hex
    self.locale: Locale = resolve_locale(locale)
    self.bill_amount_text = ""
    self.tip_percent_text = ""
    self._listeners: List[Callable[["TipForm"], None]] = []

  def on_change(self, listener: Callable[["TipForm"], None]) -> None:
    """Register a callback invoked after either text changes"""
    self._listeners.append(listener)

  def _changed(self) -> None:
    for listener in self._listeners:
      listener(self)

  def set_bill_amount_text(self, text: str) -> None:
    """Store the bill amount text as typed"""
    self.bill_amount_text = text
    self._changed()

  def set_tip_percent_text(self, text: str) -> None:
    """Store the tip percentage text as typed"""
    self.tip_percent_text = text
    self._changed()

  @property
  def amount(self) -> float:
    return parse_decimal_text(self.bill_amount_text)

  @property
  def tip_percent(self) -> float:
    return parse_decimal_text(self.tip_percent_text)

  @property
  def tip_amount(self) -> float:
    return compute_tip(self.amount, self.tip_percent)

  @property
  def formatted_tip(self) -> str:
    return calculate_tip(self.amount, self.tip_percent, self.locale)

  def snapshot(self, strings: StringTable) -> TipFormState:
    """Derive the full render state, filling the result template from `strings`"""
    formatted_tip = self.formatted_tip
    return TipFormState(
      screen_id=self.screen_id,
      locale=str(self.locale),
      currency=currency_for_locale(self.locale),
      bill_amount_text=self.bill_amount_text,
      tip_percent_text=self.tip_percent_text,
      amount=self.amount,
      tip_percent=self.tip_percent,
      tip_amount=self.tip_amount,
      formatted_tip=formatted_tip,
      tip_amount_text=strings.get_string("tip_amount", self.locale, tip=formatted_tip),
    )
