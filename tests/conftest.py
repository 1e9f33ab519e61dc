"""
Pytest configuration and shared fixtures for the i18n and content tests.
"""
import pytest

from portfolio.i18n.catalog import load_catalogs
from portfolio.i18n.document import HostDocument
from portfolio.i18n.state import LocaleState
from portfolio.i18n.storage import MemoryPreferenceStore
from portfolio.i18n.translator import Translator


@pytest.fixture(scope="session")
def catalogs():
    """The bundled catalogs, loaded once."""
    return load_catalogs()


@pytest.fixture
def sample_catalogs():
    """Small catalogs with deliberate gaps in the Turkish one"""
    return {
        "en": {
            "nav": {"home": "Home", "about": "About"},
            "footer": {"copyright": "© {{year}} Serhat Soysal. All rights reserved."},
            "greeting": "Hello {{name}}, you have {{count}} messages",
            "only": {"in": {"english": "English only"}},
            "tags": ["Python", "Streamlit"],
            "empty": "",
        },
        "tr": {
            "nav": {"home": "Ana Sayfa"},
            "footer": {"copyright": "© {{year}} Serhat Soysal. Tüm hakları saklıdır."},
            "greeting": "Merhaba {{name}}",
        },
    }


@pytest.fixture
def store():
    """Empty in-memory preference store"""
    return MemoryPreferenceStore()


@pytest.fixture
def make_state(store):
    """Factory building a LocaleState on the shared store"""
    def _make(browser_language=None, document=None):
        return LocaleState(store, document or HostDocument(), browser_language)
    return _make


@pytest.fixture
def make_translator(sample_catalogs, make_state):
    """Factory building a Translator over the sample catalogs"""
    def _make(code="en", catalogs=None):
        state = make_state()
        state.switch_locale(code)
        return Translator(catalogs if catalogs is not None else sample_catalogs, state)
    return _make
