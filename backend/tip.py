"""
Tip calculation.

Pure functions with no UI dependency. Rounding to the currency's minor unit
is left to the currency formatter.
"""

from typing import Optional

from babel import Locale
from babel.numbers import format_currency, get_territory_currencies

from backend.config import AppConfig
from backend.localization import LocaleLike, resolve_locale


def compute_tip(amount: float, tip_percent: float) -> float:
  """Return the raw tip value, `tip_percent` percent of `amount`"""
  return tip_percent / 100 * amount


def currency_for_locale(locale: Locale) -> str:
  """
  Return the ISO 4217 code of the currency in use in the locale's territory.

  Locales without a territory ("en", "de") have no currency of their own and
  use AppConfig.DEFAULT_CURRENCY.
  """
  if locale.territory:
    currencies = get_territory_currencies(locale.territory)
    if currencies:
      return currencies[0]
  return AppConfig.DEFAULT_CURRENCY


def calculate_tip(
  amount: float, tip_percent: float, locale: Optional[LocaleLike] = None
) -> str:
  """
  Calculates the tip from the bill amount and tip percentage and formats it
  according to the locale's currency, e.g. "$10.00".
  """
  resolved = resolve_locale(locale)
  tip = compute_tip(amount, tip_percent)
  return format_currency(tip, currency_for_locale(resolved), locale=resolved)
