"""Tests for the tip screen form state"""

import json
import math

import pytest

from backend.form import TipForm, TipFormState, parse_decimal_text


@pytest.mark.parametrize(
  "text,expected",
  [
    ("50", 50.0),
    ("  12.5 ", 12.5),
    ("+7", 7.0),
    (".5", 0.5),
    ("5.", 5.0),
    ("1e2", 100.0),
    ("0", 0.0),
    ("-0", 0.0),
  ],
)
def test_parse_decimal_text(text, expected):
  assert parse_decimal_text(text) == expected


@pytest.mark.parametrize(
  "text",
  ["", "   ", "abc", "12abc", "1,5", "1_000", "1.2.3", "nan", "inf", "-3", "1e400", "$5"],
)
def test_unparsable_text_is_zero(text):
  assert parse_decimal_text(text) == 0.0


@pytest.fixture
def form():
  return TipForm(locale="en_US")


class TestEndToEnd:
  def test_fifty_at_eighteen_percent(self, form):
    form.set_bill_amount_text("50")
    form.set_tip_percent_text("18")
    assert form.formatted_tip == "$9.00"

  def test_empty_amount(self, form):
    form.set_bill_amount_text("")
    form.set_tip_percent_text("20")
    assert form.formatted_tip == "$0.00"

  def test_unparsable_amount(self, form):
    form.set_bill_amount_text("abc")
    form.set_tip_percent_text("15")
    assert form.formatted_tip == "$0.00"

  def test_empty_percent_is_zero_not_fifteen(self, form):
    form.set_bill_amount_text("100")
    form.set_tip_percent_text("")
    assert form.tip_percent == 0.0
    assert form.formatted_tip == "$0.00"


class TestTipForm:
  def test_starts_empty(self, form):
    assert form.bill_amount_text == ""
    assert form.tip_percent_text == ""
    assert form.amount == 0.0
    assert form.formatted_tip == "$0.00"

  def test_text_stored_verbatim(self, form):
    form.set_bill_amount_text(" 12,50 € ")
    form.set_tip_percent_text("lots")
    assert form.bill_amount_text == " 12,50 € "
    assert form.tip_percent_text == "lots"
    assert form.amount == 0.0
    assert form.tip_percent == 0.0

  def test_unparsable_amount_matches_explicit_zero(self):
    garbage = TipForm(locale="en_US")
    garbage.set_bill_amount_text("not a number")
    garbage.set_tip_percent_text("18")

    zero = TipForm(locale="en_US")
    zero.set_bill_amount_text("0")
    zero.set_tip_percent_text("18")

    assert garbage.formatted_tip == zero.formatted_tip

  def test_derived_values_follow_edits(self, form):
    form.set_bill_amount_text("50")
    form.set_tip_percent_text("18")
    assert form.tip_amount == pytest.approx(9.0)

    form.set_bill_amount_text("500")
    assert form.tip_amount == pytest.approx(90.0)
    assert form.formatted_tip == "$90.00"

  def test_on_change_listeners(self, form):
    seen = []
    form.on_change(lambda f: seen.append((f.bill_amount_text, f.tip_percent_text)))

    form.set_bill_amount_text("4")
    form.set_tip_percent_text("2")

    assert seen == [("4", ""), ("4", "2")]

  def test_locale_formatting(self):
    form = TipForm(locale="de_DE")
    form.set_bill_amount_text("50")
    form.set_tip_percent_text("17")
    assert form.formatted_tip == "8,50\xa0€"

  def test_invalid_locale(self):
    with pytest.raises(ValueError):
      TipForm(locale="not a locale")

  def test_unique_screen_ids(self):
    assert TipForm().screen_id != TipForm().screen_id


class TestSnapshot:
  def test_snapshot(self, form, strings):
    form.set_bill_amount_text("50")
    form.set_tip_percent_text("18")

    state = form.snapshot(strings)

    assert isinstance(state, TipFormState)
    assert state.screen_id == form.screen_id
    assert state.locale == "en_US"
    assert state.currency == "USD"
    assert state.bill_amount_text == "50"
    assert state.tip_percent_text == "18"
    assert state.amount == 50.0
    assert state.tip_percent == 18.0
    assert state.tip_amount == pytest.approx(9.0)
    assert state.formatted_tip == "$9.00"
    assert state.tip_amount_text == "Tip Amount: $9.00"

  def test_snapshot_translated_template(self, strings):
    form = TipForm(locale="es_ES")
    form.set_bill_amount_text("20")
    form.set_tip_percent_text("10")

    state = form.snapshot(strings)

    assert state.currency == "EUR"
    assert state.tip_amount_text == f"Propina: {state.formatted_tip}"

  def test_overflowing_tip_serializes_as_string(self, form, strings):
    form.set_bill_amount_text("1e308")
    form.set_tip_percent_text("500")

    state = form.snapshot(strings)

    assert math.isinf(state.tip_amount)
    assert state.formatted_tip == "$∞"
    assert json.loads(state.model_dump_json())["tip_amount"] == "Infinity"
