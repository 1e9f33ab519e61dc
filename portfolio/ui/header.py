"""Header component for the application."""

import streamlit as st
from ..i18n import use_translation

class Header:
    """Top bar showing the site title and the active language."""

    def render(self):
        """Render the brand line and active locale badge."""
        i18n = use_translation()
        cl, cr = st.columns([0.8, 0.2])

        with cl:
            st.markdown(
                f"<div class='brand-title'>{i18n.t('home.hero.name')} · "
                f"<span class='muted'>{i18n.t('home.hero.title')}</span></div>",
                unsafe_allow_html=True,
            )

        with cr:
            locale = i18n.current_locale
            st.markdown(
                f"<div style='text-align:end;font-weight:500'>{locale.flag} {locale.code.upper()}</div>",
                unsafe_allow_html=True,
            )
