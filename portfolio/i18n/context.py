"""
Per-session translation context.

``provide_translation()`` is called once near the top of ``app.py``. It builds
the session's ``LocaleState`` and ``Translator`` and keeps the resulting
``TranslationContext`` in ``st.session_state`` so that every page and UI
component can reach it through ``use_translation()`` without passing it
around. Streamlit keeps one session state per browser tab, so each visitor
gets exactly one live context.

Calling ``use_translation()`` before the context has been provided raises
``TranslationContextError``.
"""

import logging
from typing import Any, List, Mapping, Optional

import streamlit as st

from ..config.paths import PREFERENCES_FILE
from ..config.settings import PREFERENCES_BACKEND
from .catalog import cached_catalogs
from .document import HostDocument
from .errors import TranslationContextError
from .locales import Locale
from .state import LocaleState
from .storage import JsonPreferenceStore, PreferenceStore, QueryParamPreferenceStore
from .translator import Translator

logger = logging.getLogger(__name__)

SESSION_KEY = "translation_context"

class TranslationContext:
    """Bundle of locale state and translation exposed to the UI."""

    def __init__(self, state: LocaleState, translator: Translator):
        self._state = state
        self._translator = translator

    @classmethod
    def create(cls, store: PreferenceStore, browser_language: Optional[str] = None,
               catalogs: Optional[Mapping[str, Mapping]] = None) -> "TranslationContext":
        """Build a context with its own state, document and translator."""
        state = LocaleState(store, HostDocument(), browser_language)
        if catalogs is None:
            catalogs = cached_catalogs()
        return cls(state, Translator(catalogs, state))

    @property
    def current_code(self) -> str:
        return self._state.current_code

    @property
    def current_locale(self) -> Locale:
        return self._state.current_locale

    @property
    def supported_locales(self) -> List[Locale]:
        return self._state.supported_locales

    @property
    def direction(self) -> str:
        return self._state.direction

    @property
    def document(self) -> HostDocument:
        return self._state.document

    def switch_locale(self, code: str) -> None:
        self._state.switch_locale(code)

    def translate(self, key_path: str, params: Optional[Mapping[str, Any]] = None):
        return self._translator.translate(key_path, params)

    t = translate

def detect_browser_language() -> Optional[str]:
    """Accept-Language header of the current request, if any."""
    try:
        return st.context.headers.get("Accept-Language")
    except Exception:
        logger.debug("No request headers available for language detection")
        return None

def default_store(backend: str = PREFERENCES_BACKEND) -> PreferenceStore:
    """Preference store selected by the PORTFOLIO_PREFERENCES setting."""
    if backend == "file":
        return JsonPreferenceStore(PREFERENCES_FILE)
    return QueryParamPreferenceStore()

def provide_translation(store: Optional[PreferenceStore] = None,
                        browser_language: Optional[str] = None) -> TranslationContext:
    """
    Establish the session's translation context, once.

    Later calls in the same session return the existing context unchanged.
    """
    context = st.session_state.get(SESSION_KEY)
    if context is not None:
        return context

    if store is None:
        store = default_store()
    if browser_language is None:
        browser_language = detect_browser_language()

    context = TranslationContext.create(store, browser_language)
    st.session_state[SESSION_KEY] = context
    logger.info(f"Translation context ready (locale: {context.current_code})")
    return context

def use_translation() -> TranslationContext:
    """Return the session's translation context."""
    context = st.session_state.get(SESSION_KEY)
    if context is None:
        raise TranslationContextError(
            "use_translation() called before provide_translation(); "
            "call provide_translation() at the top of app.py"
        )
    return context

def teardown_translation() -> None:
    """Drop the session's translation context."""
    if SESSION_KEY in st.session_state:
        del st.session_state[SESSION_KEY]
