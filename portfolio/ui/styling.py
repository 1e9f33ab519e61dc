"""UI styling and theming."""

import html
import streamlit as st
from ..config.settings import DARK_THEME, LIGHT_THEME, PRIMARY
from ..i18n.document import HostDocument

class UIStyles:
    """Manages UI styling and theme application."""

    @staticmethod
    def theme_css(dark: bool, document: HostDocument) -> str:
        """Build the stylesheet for the colour scheme and text direction."""
        palette = DARK_THEME if dark else LIGHT_THEME
        direction = document.html_attributes()["dir"]
        align = "right" if document.is_rtl else "left"

        return f"""
        <style>
          .stApp {{
            background: {palette['bg']};
            color: {palette['text']};
          }}

          .stApp [data-testid="stMain"],
          .stApp [data-testid="stSidebarContent"] {{
            direction: {direction};
            text-align: {align};
          }}

          h1, h2, h3, h4, .brand-title {{
            color: {palette['text']};
            font-weight: 600 !important;
          }}

          .stApp p, .stApp li, .stApp label {{ color: {palette['text']}; }}

          .muted {{ color: {palette['muted']}; }}

          .card {{
            border: 1px solid {palette['border']};
            border-radius: 12px;
            padding: 18px;
            margin-bottom: 14px;
            background: {palette['surface']};
          }}

          .tag {{
            display: inline-block;
            padding: 2px 10px;
            margin: 0 6px 6px 0;
            border-radius: 999px;
            font-size: 0.8rem;
            background: {PRIMARY}22;
            color: {PRIMARY};
          }}

          .brand-title {{ font-size: 22px; }}

          /* Code blocks keep left-to-right layout in RTL pages */
          .stApp pre, .stApp code {{ direction: ltr; text-align: left; }}
        </style>
        """

    @staticmethod
    def apply_theme(dark: bool, document: HostDocument):
        """
        Apply the colour scheme and the document's text direction.

        Direction is applied through the CSS ``direction`` rule on the main
        and sidebar containers. Streamlit renders widgets outside any element
        the app controls, so ``lang`` is not set on the page.
        """
        st.markdown(UIStyles.theme_css(dark, document), unsafe_allow_html=True)

    @staticmethod
    def tags_html(tags: list) -> str:
        """Render a list of labels as pill badges."""
        return "".join(f"<span class='tag'>{html.escape(str(tag))}</span>" for tag in tags)
