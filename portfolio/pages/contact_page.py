"""Contact page with a mailto-based form."""

import logging
import streamlit as st
from pydantic import ValidationError
from ..config.settings import CONTACT_EMAIL, SOCIAL_LINKS
from ..i18n import use_translation
from ..models.contact import ContactMessage, validation_message_key

logger = logging.getLogger(__name__)

class ContactPage:
    """Contact form and contact details."""

    @staticmethod
    def _render_form(t):
        with st.form("contact_form"):
            name = st.text_input(t("contact.form.name"), placeholder=t("contact.form.placeholder.name"))
            email = st.text_input(t("contact.form.email"), placeholder=t("contact.form.placeholder.email"))
            subject = st.text_input(t("contact.form.subject"), placeholder=t("contact.form.placeholder.subject"))
            message = st.text_area(t("contact.form.message"), placeholder=t("contact.form.placeholder.message"), height=160)
            submitted = st.form_submit_button(t("contact.form.send"), type="primary")

        if not submitted:
            return

        try:
            contact = ContactMessage(name=name, email=email, subject=subject, message=message)
        except ValidationError as e:
            st.error(t(validation_message_key(e)))
            return

        logger.info("Contact message composed")
        st.success(t("contact.form.ready", {"email": CONTACT_EMAIL}))
        st.link_button(t("contact.form.open"), contact.mailto_link(CONTACT_EMAIL), type="primary")

    @staticmethod
    def render():
        """Render the contact page."""
        t = use_translation().t
        st.title(t("contact.title"))
        st.caption(t("contact.subtitle"))

        left, right = st.columns([0.6, 0.4])
        with left:
            ContactPage._render_form(t)

        with right:
            st.subheader(t("contact.info.title"))
            st.markdown(f"**{t('contact.info.email')}:** [{CONTACT_EMAIL}](mailto:{CONTACT_EMAIL})")
            st.caption(t("contact.info.response"))

            st.subheader(t("contact.info.social"))
            st.caption(t("contact.info.connect"))
            for link in SOCIAL_LINKS:
                st.markdown(f"- [{link['name']}]({link['url']})")
