"""Fallback page for unknown routes."""

import streamlit as st
from ..i18n import use_translation
from ..ui.navigation import go_to

class NotFoundPage:
    """Shown when the requested page does not exist."""

    @staticmethod
    def render():
        t = use_translation().t
        st.markdown("# 404")
        st.header(t("common.notFound"))
        st.write(t("common.error"))
        st.button(t("common.backHome"), type="primary", on_click=go_to, args=("home",))
