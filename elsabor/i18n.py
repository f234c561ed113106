"""
Locale Resolver

Loads the per-language dictionaries of display strings from
``elsabor/locales/<lang>.json``. Dictionaries are read from disk on every
call; nothing is cached between requests.

A dictionary that cannot be loaded (missing file, bad JSON, unsupported
code) silently degrades to the default language. Rejecting an unsupported
language *prefix* is the router's job, not this module's.
"""

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

from elsabor.core.config import get_settings

logger = logging.getLogger(__name__)


def supported_languages() -> list[str]:
    """Language codes the site is published in."""
    return get_settings().supported_languages_list


def default_language() -> str:
    return get_settings().default_language


def is_supported(lang: Optional[str]) -> bool:
    return lang in supported_languages()


def lang_path(lang: str) -> str:
    """URL prefix for links in the given language ("" for the default)."""
    return "" if lang == default_language() else f"/{lang}"


def _read_dictionary(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} does not hold a JSON object")
    return data


def load_locale(lang: str, directory: Optional[str] = None) -> dict[str, Any]:
    """
    Load the dictionary for ``lang``.

    Args:
        lang: Language code (e.g. "es", "en")
        directory: Override for the locales directory

    Returns:
        The language's dictionary, or the default-language dictionary if
        ``lang`` is unsupported or its file cannot be read or parsed.
    """
    base = Path(directory or get_settings().locales_directory)
    fallback = default_language()

    if is_supported(lang):
        try:
            return _read_dictionary(base / f"{lang}.json")
        except (OSError, ValueError) as e:
            logger.warning(f"Locale '{lang}' unavailable, falling back to '{fallback}': {e}")
    else:
        logger.warning(f"Locale '{lang}' not supported, falling back to '{fallback}'")

    return _read_dictionary(base / f"{fallback}.json")


# =============================================================================
# DATE FORMATTING
# =============================================================================

def format_long_date(value: date, translations: dict[str, Any]) -> str:
    """
    Format ``value`` as a long, human-readable date.

    Uses the dictionary's ``dias`` (Monday first), ``meses`` (January first)
    and ``formato_fecha`` entries, e.g. "lunes, 21 de octubre de 2026".
    """
    weekday = translations["dias"][value.weekday()]
    month = translations["meses"][value.month - 1]
    return translations["formato_fecha"].format(
        weekday=weekday,
        day=value.day,
        month=month,
        year=value.year,
    )


def format_date_time(value: datetime, translations: dict[str, Any]) -> str:
    """Long date followed by the 24h time."""
    return f"{format_long_date(value, translations)}, {value:%H:%M}"
