"""
Message catalogs for validation errors.

Catalogs are JSON files named `<locale>.json`. The catalogs bundled with the
package (`fast_rules/lang`) provide the default rule messages; an application
catalog found under `LOCALE_PATH` is merged over them key by key.

Usage:
    from fast_rules.core.localization import __, set_locale

    __('validation.messages.is_required')                  # "is required"
    __('validation.fields.email', default='email')         # field display name
    __('validation.messages.is_required', locale='es')     # force locale
    set_locale('es')                                       # change locale for this context
"""

import json
import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional

from fast_rules import config
from fast_rules.contracts.localizer import Localizer

_BUNDLED_PATH = Path(__file__).resolve().parent.parent / "lang"

_translations: Dict[str, Dict[str, Any]] = {}
_locale_path: str = config.LOCALE_PATH
_current_locale: ContextVar[str] = ContextVar('locale', default=config.LOCALE_DEFAULT)


def _get_nested(data: Dict[str, Any], key: str) -> Optional[str]:
    """Navigate nested dict with dot notation."""
    current = data
    for part in key.split('.'):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    return current


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_catalog(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open(encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logging.warning(f"Unable to read locale catalog {path}: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def _load_locale(locale: str) -> Dict[str, Any]:
    """Load and cache translations for a locale. Idempotent."""
    if locale in _translations:
        return _translations[locale]

    translations = _deep_merge(
        _read_catalog(_BUNDLED_PATH / f"{locale}.json"),
        _read_catalog(Path(_locale_path) / f"{locale}.json"),
    )

    _translations[locale] = translations
    return translations


def __(key: str, parameters: Optional[Dict[str, Any]] = None,
       default: Optional[str] = None, locale: Optional[str] = None) -> str:
    """
    Translate a dotted catalog key.

    Lookup order: requested (or current) locale, then LOCALE_FALLBACK, then
    `default`, then the key itself. `parameters` are applied with str.format.
    """
    current_locale = locale or _current_locale.get()

    translation = _get_nested(_load_locale(current_locale), key)

    if translation is None and current_locale != config.LOCALE_FALLBACK:
        translation = _get_nested(_load_locale(config.LOCALE_FALLBACK), key)

    if translation is None:
        translation = default or key

    if parameters and isinstance(translation, str):
        try:
            translation = translation.format(**parameters)
        except (KeyError, ValueError):
            pass

    return str(translation)


def set_locale(locale: str) -> None:
    _current_locale.set(locale)


def get_locale() -> str:
    return _current_locale.get()


def clear_cache() -> None:
    _translations.clear()


def set_locale_path(path: str) -> None:
    """Point application catalogs at another directory and drop cached catalogs."""
    global _locale_path
    _locale_path = path
    clear_cache()


trans = __


class CatalogLocalizer(Localizer):
    """Default `Localizer` backed by the JSON catalogs of this module."""

    def __init__(
        self,
        *,
        messages_namespace: Optional[str] = None,
        fields_namespace: Optional[str] = None,
    ) -> None:
        self.messages_namespace = messages_namespace or config.VALIDATION_MESSAGES_NAMESPACE
        self.fields_namespace = fields_namespace or config.VALIDATION_FIELDS_NAMESPACE

    def message(self, phrase: str, locale: str) -> str:
        return __(f"{self.messages_namespace}.{phrase}", default=phrase, locale=locale)

    def field_name(self, field: str, locale: str) -> str:
        return __(f"{self.fields_namespace}.{field}", default=field, locale=locale)


__all__ = [
    "__",
    "trans",
    "set_locale",
    "get_locale",
    "clear_cache",
    "set_locale_path",
    "CatalogLocalizer",
]
