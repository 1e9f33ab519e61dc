"""
Unit tests for the per-session translation context.

Streamlit's session state is replaced by a plain dict so the context can be
exercised without a running app.
"""
import pytest
from unittest.mock import patch

import streamlit as st

from portfolio.i18n.context import (
    SESSION_KEY,
    TranslationContext,
    default_store,
    provide_translation,
    teardown_translation,
    use_translation,
)
from portfolio.i18n.errors import TranslationContextError
from portfolio.i18n.storage import JsonPreferenceStore, MemoryPreferenceStore, QueryParamPreferenceStore


@pytest.fixture
def session_state():
    state = {}
    with patch.object(st, "session_state", state):
        yield state


class TestUseTranslation:
    """Tests for use_translation"""

    def test_raises_without_binding(self, session_state):
        with pytest.raises(TranslationContextError):
            use_translation()

    def test_returns_provided_context(self, session_state):
        context = provide_translation(MemoryPreferenceStore(), "tr-TR")
        assert use_translation() is context
        assert session_state[SESSION_KEY] is context

    def test_raises_after_teardown(self, session_state):
        provide_translation(MemoryPreferenceStore(), "en-US")
        teardown_translation()
        with pytest.raises(TranslationContextError):
            use_translation()

    def test_teardown_without_binding_is_harmless(self, session_state):
        teardown_translation()
        assert SESSION_KEY not in session_state


class TestProvideTranslation:
    """Tests for provide_translation"""

    def test_initializes_once_per_session(self, session_state):
        first = provide_translation(MemoryPreferenceStore(), "tr-TR")
        second = provide_translation(MemoryPreferenceStore(), "it-IT")

        assert second is first
        assert second.current_code == "tr"

    def test_exposes_locale_bundle(self, session_state):
        context = provide_translation(MemoryPreferenceStore(), "ar-SA")

        assert context.current_code == "ar"
        assert context.current_locale.name == "العربية"
        assert context.direction == "rtl"
        assert context.document.dir == "rtl"
        assert [l.code for l in context.supported_locales] == ["en", "tr", "ar", "it"]

    def test_switch_and_translate(self, session_state):
        context = provide_translation(MemoryPreferenceStore(), "en-US")
        assert context.t("nav.home") == "Home"

        context.switch_locale("tr")

        assert use_translation().t("nav.home") == "Ana Sayfa"
        assert context.document.lang == "tr"

    def test_saved_choice_carries_into_a_new_session(self):
        """A second session on the same URL starts with the saved locale"""
        params = {}
        with patch.object(st, "query_params", params):
            with patch.object(st, "session_state", {}):
                provide_translation(browser_language="en-US").switch_locale("it")
            with patch.object(st, "session_state", {}):
                context = provide_translation(browser_language="en-US")

        assert context.current_code == "it"
        assert params == {"preferred-language": "it"}

    def test_default_store_selection(self):
        assert isinstance(default_store("file"), JsonPreferenceStore)
        assert isinstance(default_store("query"), QueryParamPreferenceStore)


class TestTranslationContext:
    """Tests for independently created contexts"""

    def test_instances_are_independent(self, catalogs):
        first = TranslationContext.create(MemoryPreferenceStore(), "en", catalogs)
        second = TranslationContext.create(MemoryPreferenceStore(), "en", catalogs)

        first.switch_locale("it")

        assert first.translate("nav.about") == "Chi Sono"
        assert second.translate("nav.about") == "About"

    def test_params_pass_through(self, catalogs):
        context = TranslationContext.create(MemoryPreferenceStore(), "it", catalogs)
        assert context.translate("footer.copyright", {"year": 2030}) == \
            "© 2030 Serhat Soysal. Tutti i diritti riservati."
