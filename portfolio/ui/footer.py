"""Footer component."""

from datetime import datetime
import streamlit as st
from ..config.settings import AUTHOR_NAME, CONTACT_EMAIL, NAV_ITEMS, SOCIAL_LINKS
from ..i18n import use_translation
from .navigation import go_to

class Footer:
    """Site footer with quick links, contact details and copyright."""

    def render(self):
        t = use_translation().t
        st.markdown("---")
        c1, c2, c3 = st.columns(3)

        with c1:
            st.markdown(f"**{AUTHOR_NAME}**")
            st.caption(t("footer.description"))
            st.markdown(" · ".join(f"[{link['name']}]({link['url']})" for link in SOCIAL_LINKS))

        with c2:
            st.markdown(f"**{t('footer.quickLinks')}**")
            for page, label_key in NAV_ITEMS:
                st.button(t(label_key), key=f"footer_{page}", type="tertiary", on_click=go_to, args=(page,))

        with c3:
            st.markdown(f"**{t('footer.contact')}**")
            st.markdown(f"{t('contact.info.email')}: {CONTACT_EMAIL}")
            st.caption(t("contact.info.response"))

        st.markdown(
            f"<div style='text-align:center' class='muted'>{t('footer.copyright', {'year': datetime.now().year})}"
            f"<br/><small>{t('footer.builtWith')}</small></div>",
            unsafe_allow_html=True,
        )
