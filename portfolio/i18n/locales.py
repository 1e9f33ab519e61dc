"""Registry of supported UI locales."""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict

class Locale(BaseModel):
    """A supported UI language."""
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    flag: str

    @property
    def label(self) -> str:
        """Label used by language selectors, e.g. '🇹🇷 Türkçe'."""
        return f"{self.flag} {self.name}"

# Insertion order is the display order
SUPPORTED_LOCALES: Dict[str, Locale] = {
    locale.code: locale
    for locale in (
        Locale(code="en", name="English", flag="🇺🇸"),
        Locale(code="tr", name="Türkçe", flag="🇹🇷"),
        Locale(code="ar", name="العربية", flag="🇸🇦"),
        Locale(code="it", name="Italiano", flag="🇮🇹"),
    )
}

DEFAULT_LOCALE = "en"
REFERENCE_LOCALE = "en"
RTL_LOCALES = frozenset({"ar"})

def get_locale(code) -> Optional[Locale]:
    """Return the locale registered under ``code``, or None."""
    if not isinstance(code, str):
        return None
    return SUPPORTED_LOCALES.get(code)

def is_supported(code) -> bool:
    """Check whether ``code`` is a registered locale code."""
    return get_locale(code) is not None

def list_locales() -> List[Locale]:
    """Return all registered locales in display order."""
    return list(SUPPORTED_LOCALES.values())

def text_direction(code: str) -> str:
    """Reading direction for a locale code: 'rtl' or 'ltr'."""
    return "rtl" if code in RTL_LOCALES else "ltr"
