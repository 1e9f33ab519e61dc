"""
Unit tests for translation lookup.

Tests focus on:
- Active locale -> English -> raw key fallback chain
- {{name}} interpolation rules
- Structured values returned as-is
"""
from portfolio.i18n.translator import MISSING, Translator, interpolate


class TestFallbackChain:
    """Tests for the lookup order"""

    def test_active_locale_value(self, make_translator):
        assert make_translator("tr").translate("nav.home") == "Ana Sayfa"

    def test_falls_back_to_english(self, make_translator):
        """Keys missing in Turkish resolve from English"""
        assert make_translator("tr").translate("nav.about") == "About"
        assert make_translator("tr").translate("only.in.english") == "English only"

    def test_missing_everywhere_returns_key(self, make_translator):
        assert make_translator("tr").translate("does.not.exist") == "does.not.exist"

    def test_partial_path_returns_key(self, make_translator):
        """Descending through a leaf string fails cleanly"""
        assert make_translator().translate("nav.home.extra") == "nav.home.extra"

    def test_fallback_is_per_lookup(self, make_translator):
        """A missing key does not push other keys to English"""
        translator = make_translator("tr")
        assert translator.translate("nav.about") == "About"
        assert translator.translate("nav.home") == "Ana Sayfa"

    def test_locale_without_catalog(self, make_translator):
        """A registered locale with no catalog resolves everything from English"""
        assert make_translator("it").translate("nav.home") == "Home"

    def test_follows_locale_switches(self, make_translator):
        translator = make_translator("en")
        assert translator.translate("nav.home") == "Home"
        translator.state.switch_locale("tr")
        assert translator.translate("nav.home") == "Ana Sayfa"

    def test_empty_value_falls_back_to_english(self, make_state):
        """An empty translation does not hide the English text"""
        translator = Translator({"en": {"a": "Home"}, "tr": {"a": ""}}, make_state("tr"))
        assert translator.translate("a") == "Home"

    def test_empty_everywhere_returns_key(self, make_translator):
        assert make_translator().translate("empty") == "empty"
        assert make_translator("tr").translate("empty") == "empty"

    def test_t_alias(self, make_translator):
        assert make_translator("tr").t("nav.home") == "Ana Sayfa"


class TestInterpolation:
    """Tests for {{name}} substitution"""

    def test_replaces_known_params(self, make_translator):
        result = make_translator().translate("footer.copyright", {"year": "2024"})
        assert result == "© 2024 Serhat Soysal. All rights reserved."

    def test_non_string_params_are_stringified(self, make_translator):
        result = make_translator().translate("footer.copyright", {"year": 2024})
        assert result == "© 2024 Serhat Soysal. All rights reserved."

    def test_unknown_placeholders_are_kept(self, make_translator):
        result = make_translator().translate("greeting", {"name": "Ada"})
        assert result == "Hello Ada, you have {{count}} messages"

    def test_no_params_keeps_tokens(self, make_translator):
        translator = make_translator()
        expected = "© {{year}} Serhat Soysal. All rights reserved."
        assert translator.translate("footer.copyright") == expected
        assert translator.translate("footer.copyright", {}) == expected

    def test_interpolates_fallback_values(self, make_translator):
        """Params apply to strings that came from English too"""
        catalogs = {"en": {"x": "{{x}} items"}, "tr": {}}
        assert make_translator("tr", catalogs).translate("x", {"x": "5"}) == "5 items"

    def test_interpolates_active_locale(self, make_translator):
        result = make_translator("tr").translate("footer.copyright", {"year": "2025"})
        assert result == "© 2025 Serhat Soysal. Tüm hakları saklıdır."

    def test_interpolate_helper(self):
        assert interpolate("{{a}}-{{b}}-{{a}}", {"a": 1}) == "1-{{b}}-1"
        assert interpolate("{ {a} }", {"a": 1}) == "{ {a} }"


class TestStructuredValues:
    """Tests for keys that resolve to lists or sub-trees"""

    def test_list_returned_as_is(self, make_translator):
        assert make_translator().translate("tags", {"x": "ignored"}) == ["Python", "Streamlit"]

    def test_subtree_returned_as_mapping(self, make_translator):
        nav = make_translator("tr").translate("nav", {"x": "ignored"})
        assert dict(nav) == {"home": "Ana Sayfa"}


class TestLookup:
    """Tests for the single-catalog lookup result"""

    def test_found(self, make_translator):
        result = make_translator().lookup("en", "nav.home")
        assert result.found
        assert result.value == "Home"

    def test_missing(self, make_translator):
        assert make_translator().lookup("tr", "nav.about") == MISSING
        assert make_translator().lookup("xx", "nav.home") == MISSING

    def test_none_counts_as_missing(self, make_state):
        translator = Translator({"en": {"a": "A"}, "tr": {"a": None}}, make_state("tr"))
        assert translator.translate("a") == "A"

    def test_empty_string_counts_as_missing(self, make_translator):
        assert make_translator().lookup("en", "empty") == MISSING


class TestBundledCatalogs:
    """Scenarios against the shipped catalogs"""

    def test_turkish_home(self, catalogs, make_state):
        translator = Translator(catalogs, make_state("tr-TR"))
        assert translator.translate("nav.home") == "Ana Sayfa"

    def test_copyright_year(self, catalogs, make_state):
        translator = Translator(catalogs, make_state())
        assert translator.translate("footer.copyright", {"year": "2024"}) == \
            "© 2024 Serhat Soysal. All rights reserved."

    def test_arabic_falls_back_for_highlights(self, catalogs, make_state):
        translator = Translator(catalogs, make_state("ar"))
        assert translator.translate("about.highlights") == catalogs["en"]["about"]["highlights"]

    def test_unknown_key(self, catalogs, make_state):
        translator = Translator(catalogs, make_state())
        assert translator.translate("does.not.exist") == "does.not.exist"
