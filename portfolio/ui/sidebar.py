"""Sidebar component for navigation and user controls."""

import streamlit as st
from ..config.paths import LOGO_CANDIDATES
from ..config.settings import AUTHOR_NAME, NAV_ITEMS
from ..i18n import get_locale, use_translation
from ..utils.file_utils import FileUtils
from .navigation import go_to

class Sidebar:
    """Application sidebar: navigation, language and theme controls."""

    def __init__(self):
        self.logo_bytes = FileUtils.load_logo_bytes(LOGO_CANDIDATES)
        self.i18n = use_translation()

    def render(self, active_page: str):
        """Render the sidebar."""
        t = self.i18n.t
        with st.sidebar:
            logo_tag = FileUtils.create_logo_tag(self.logo_bytes, 48, AUTHOR_NAME)
            st.markdown(
                f"<div style='display:flex;align-items:center;gap:10px'>{logo_tag}"
                f"<span class='brand-title'>{AUTHOR_NAME}</span></div>",
                unsafe_allow_html=True,
            )
            st.markdown("---")

            # Navigation
            for page, label_key in NAV_ITEMS:
                is_active = active_page == page or (page == "blog" and active_page == "post")
                st.button(
                    t(label_key),
                    key=f"nav_{page}",
                    type="primary" if is_active else "secondary",
                    use_container_width=True,
                    on_click=go_to,
                    args=(page,),
                )

            st.markdown("---")

            # Language
            codes = [locale.code for locale in self.i18n.supported_locales]
            choice = st.selectbox(
                t("common.language"),
                codes,
                index=codes.index(self.i18n.current_code),
                format_func=lambda code: get_locale(code).label,
            )
            if choice != self.i18n.current_code:
                self.i18n.switch_locale(choice)
                st.rerun()

            # Theme
            st.session_state.dark_mode = st.toggle(
                t("common.darkMode"),
                value=st.session_state.get("dark_mode", False),
                help=t("common.toggleTheme"),
            )
