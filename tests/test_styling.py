"""
Unit tests for theme CSS generation.
"""
from unittest.mock import patch

from portfolio.config.settings import DARK_THEME, LIGHT_THEME
from portfolio.i18n.document import HostDocument
from portfolio.ui.styling import UIStyles


class TestThemeCss:
    """Tests for UIStyles.theme_css"""

    def test_rtl_document(self):
        css = UIStyles.theme_css(False, HostDocument(lang="ar", dir="rtl"))
        assert "direction: rtl;" in css
        assert "text-align: right;" in css

    def test_ltr_document(self):
        css = UIStyles.theme_css(False, HostDocument())
        assert "direction: ltr;" in css
        assert "text-align: left;" in css

    def test_code_blocks_stay_ltr(self):
        css = UIStyles.theme_css(False, HostDocument(lang="ar", dir="rtl"))
        assert ".stApp pre, .stApp code { direction: ltr; text-align: left; }" in css

    def test_palette(self):
        assert DARK_THEME["bg"] in UIStyles.theme_css(True, HostDocument())
        assert LIGHT_THEME["bg"] in UIStyles.theme_css(False, HostDocument())


class TestApplyTheme:
    """Tests for UIStyles.apply_theme"""

    def test_injects_only_the_stylesheet(self):
        document = HostDocument(lang="ar", dir="rtl")
        with patch("portfolio.ui.styling.st.markdown") as markdown:
            UIStyles.apply_theme(False, document)

        markdown.assert_called_once_with(UIStyles.theme_css(False, document), unsafe_allow_html=True)
