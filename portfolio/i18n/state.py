"""
Active locale state for a single application session.

The state is chosen once when a ``LocaleState`` is created:

    1. a previously persisted choice (``preferred-language``) if it names a
       registered locale,
    2. otherwise the primary subtag of the browser's language preference
       ("tr-TR" -> "tr") if registered,
    3. otherwise the default locale ("en").

After the initial choice and after every accepted ``switch_locale`` call the
same side effects run synchronously: the code is persisted to the preference
store, and the host document's ``lang``/``dir`` attributes are updated.
Unregistered codes are ignored without raising.
"""

import logging
from typing import List, Optional

from ..config.settings import STORAGE_KEY
from .document import HostDocument
from .locales import DEFAULT_LOCALE, Locale, get_locale, is_supported, list_locales, text_direction
from .storage import PreferenceStore

logger = logging.getLogger(__name__)

def primary_subtag(language: Optional[str]) -> Optional[str]:
    """
    Reduce a language preference to its primary subtag.

    Accepts a single tag ("en-US", "pt_BR") or a full Accept-Language header
    ("tr-TR,tr;q=0.9,en;q=0.8"), in which case only the first entry is used.

    Returns:
        Lowercased primary subtag, or None when nothing usable is given.
    """
    if not language or not isinstance(language, str):
        return None
    first = language.split(",")[0].split(";")[0].strip()
    subtag = first.replace("_", "-").split("-")[0].strip().lower()
    return subtag or None

class LocaleState:
    """Owns the active locale code and applies its side effects."""

    def __init__(self, store: PreferenceStore, document: Optional[HostDocument] = None,
                 browser_language: Optional[str] = None):
        self.store = store
        self.document = document or HostDocument()
        self._code = self._initial_code(browser_language)
        self._apply()

    def _initial_code(self, browser_language: Optional[str]) -> str:
        """Pick the starting locale: persisted, then browser, then default."""
        saved = self.store.get(STORAGE_KEY)
        if is_supported(saved):
            logger.debug(f"Locale restored from preferences: {saved}")
            return saved

        browser = primary_subtag(browser_language)
        if is_supported(browser):
            logger.debug(f"Locale taken from browser preference '{browser_language}': {browser}")
            return browser

        logger.debug(f"Locale defaulted to {DEFAULT_LOCALE} (browser: {browser_language!r})")
        return DEFAULT_LOCALE

    def _apply(self):
        """Persist the active code and mirror it onto the document."""
        self.store.set(STORAGE_KEY, self._code)
        self.document.lang = self._code
        self.document.dir = text_direction(self._code)

    @property
    def current_code(self) -> str:
        return self._code

    @property
    def current_locale(self) -> Locale:
        return get_locale(self._code)

    @property
    def direction(self) -> str:
        return text_direction(self._code)

    @property
    def supported_locales(self) -> List[Locale]:
        return list_locales()

    def switch_locale(self, code: str) -> None:
        """Make ``code`` the active locale. Unregistered codes are ignored."""
        if not is_supported(code):
            logger.debug(f"Ignoring switch to unsupported locale: {code!r}")
            return

        previous = self._code
        self._code = code
        self._apply()
        if previous != code:
            logger.info(f"Locale switched: {previous} -> {code}")
