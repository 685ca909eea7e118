"""
Narrative text for the Five-Year Plan simulation.

Event copy, endings, achievements and interface strings are kept in JSON
locale files so the engine never carries display text. Keys are dotted
paths into the file, e.g. ``events.great_leap_forward.title``.
"""

import json
from pathlib import Path
from typing import Any

_LOCALES_DIR = Path(__file__).parent / "locales"
_DEFAULT_LANGUAGE = "en"
_current_locale: dict[str, Any] = {}
_current_language: str = _DEFAULT_LANGUAGE


def load_locale(language: str = _DEFAULT_LANGUAGE) -> dict[str, Any]:
    """
    Load the locale file for a language, falling back to English.

    Args:
        language: Language code (e.g., 'en')

    Returns:
        Dictionary of strings
    """
    global _current_locale, _current_language

    locale_file = _LOCALES_DIR / f"{language}.json"
    if not locale_file.exists():
        locale_file = _LOCALES_DIR / f"{_DEFAULT_LANGUAGE}.json"
        language = _DEFAULT_LANGUAGE

    with open(locale_file, "r", encoding="utf-8") as f:
        _current_locale = json.load(f)

    _current_language = language
    return _current_locale


def t(key: str, **kwargs: Any) -> str:
    """
    Look up a string in the current locale.

    Args:
        key: Dot-separated key, e.g. 'endings.industrial_giant.title'
        **kwargs: Format arguments for string interpolation

    Returns:
        The formatted string, or the key itself if it is missing
    """
    if not _current_locale:
        load_locale()

    value: Any = _current_locale
    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return key

    if not isinstance(value, str):
        return key

    try:
        return value.format(**kwargs)
    except KeyError:
        return value


def get_available_languages() -> list[str]:
    """Return list of available language codes."""
    return sorted(f.stem for f in _LOCALES_DIR.glob("*.json"))


def get_current_language() -> str:
    """Return the current language code."""
    return _current_language
