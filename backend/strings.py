"""
Resource strings
Loads the translatable UI texts from YAML and resolves them per locale
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, model_validator

from backend.exceptions import UnknownStringError
from backend.localization import LocaleLike, resolve_locale

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
STRINGS_PATH = Path(__file__).parent / "resources" / "strings.yaml"

# Every identifier the UI uses
STRING_IDS = (
  "app_name",
  "calculate_tip",
  "bill_amount",
  "how_was_the_service",
  "tip_amount",
)


class StringTable(BaseModel):
  """Translations keyed by language tag ("en", "pt_BR"), then string id"""

  translations: Dict[str, Dict[str, str]]

  @model_validator(mode="after")
  def validate_identifiers(self):
    """The default language must be complete, others may be partial"""
    default = self.translations.get(DEFAULT_LANGUAGE)
    if default is None:
      raise ValueError(f"Missing default language '{DEFAULT_LANGUAGE}'")

    missing = [string_id for string_id in STRING_IDS if string_id not in default]
    if missing:
      raise ValueError(
        f"Default language '{DEFAULT_LANGUAGE}' is missing: {', '.join(missing)}"
      )

    for tag, entries in self.translations.items():
      unknown = [string_id for string_id in entries if string_id not in STRING_IDS]
      if unknown:
        raise ValueError(f"Language '{tag}' has unknown strings: {', '.join(unknown)}")
    return self

  def _candidates(self, locale: Optional[LocaleLike]) -> list[str]:
    """Language tags to try, most specific first"""
    resolved = resolve_locale(locale)
    tags = []
    if resolved.territory:
      tags.append(f"{resolved.language}_{resolved.territory}")
    tags.append(resolved.language)
    tags.append(DEFAULT_LANGUAGE)
    return tags

  def get_string(
    self, string_id: str, locale: Optional[LocaleLike] = None, **kwargs: str
  ) -> str:
    """
    Look up a string for a locale, interpolating any keyword arguments

    Raises:
      UnknownStringError: if `string_id` is not a known identifier
    """
    if string_id not in STRING_IDS:
      raise UnknownStringError(string_id)

    for tag in self._candidates(locale):
      template = self.translations.get(tag, {}).get(string_id)
      if template is not None:
        return template.format(**kwargs) if kwargs else template

    # Unreachable while the default language is complete
    raise UnknownStringError(string_id)

  def all_strings(self, locale: Optional[LocaleLike] = None) -> Dict[str, str]:
    """Every identifier resolved for `locale`, templates left uninterpolated"""
    return {string_id: self.get_string(string_id, locale) for string_id in STRING_IDS}


def load_strings(path: Path | str = STRINGS_PATH) -> StringTable:
  """
  Load the string table from a YAML file

  Raises:
      FileNotFoundError: If the file doesn't exist
      yaml.YAMLError: If YAML is malformed
      pydantic.ValidationError: If the table is incomplete or has unknown ids
  """
  path = Path(path)

  if not path.exists():
    raise FileNotFoundError(f"String resources not found: {path}")

  with open(path, "r", encoding="utf-8") as f:
    raw = yaml.safe_load(f) or {}

  table = StringTable(translations=raw)
  logger.debug(f"Loaded strings for {len(table.translations)} languages from {path}")
  return table


# Singleton instance
_string_table: Optional[StringTable] = None


def get_string_table() -> StringTable:
  """Get or load the bundled string table"""
  global _string_table

  if _string_table is None:
    _string_table = load_strings()

  return _string_table
