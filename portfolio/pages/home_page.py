"""Landing page."""

import streamlit as st
from ..config.settings import HAPPY_CLIENTS, YEARS_EXPERIENCE
from ..content.projects import PROJECTS, technology_counts
from ..i18n import use_translation
from ..ui.navigation import go_to

SERVICES = ("fullStack", "cloudNative", "systemDesign")

class HomePage:
    """Hero, services, stats and a contact call-to-action."""

    @staticmethod
    def _render_hero(t):
        st.markdown(f"### {t('home.hero.greeting')} {t('home.hero.name')}")
        st.title(t("home.hero.title"))
        st.subheader(t("home.hero.subtitle"))
        st.write(t("home.hero.description"))

        c1, c2, c3 = st.columns(3)
        c1.button(t("home.hero.cta.viewWork"), type="primary", on_click=go_to, args=("projects",))
        c2.button(t("nav.about"), on_click=go_to, args=("about",))
        c3.button(t("home.hero.cta.getInTouch"), key="hero_contact", on_click=go_to, args=("contact",))

    @staticmethod
    def _render_services(t):
        st.header(t("home.services.title"))
        st.caption(t("home.services.subtitle"))
        for col, service in zip(st.columns(len(SERVICES)), SERVICES):
            with col:
                st.markdown(
                    f"<div class='card'><h4>{t(f'home.services.{service}.title')}</h4>"
                    f"<p>{t(f'home.services.{service}.description')}</p></div>",
                    unsafe_allow_html=True,
                )

    @staticmethod
    def _render_stats(t):
        c1, c2, c3, c4 = st.columns(4)
        c1.metric(t("home.stats.projects"), f"{len(PROJECTS)}+")
        c2.metric(t("home.stats.experience"), f"{YEARS_EXPERIENCE}+")
        c3.metric(t("home.stats.technologies"), f"{len(technology_counts())}+")
        c4.metric(t("home.stats.clients"), f"{HAPPY_CLIENTS}+")

    @staticmethod
    def render():
        """Render the home page."""
        t = use_translation().t
        HomePage._render_hero(t)
        st.markdown("---")
        HomePage._render_services(t)
        st.markdown("---")
        HomePage._render_stats(t)
        st.markdown("---")

        st.header(t("contact.title"))
        st.write(t("contact.subtitle"))
        st.button(t("home.hero.cta.getInTouch"), key="cta_contact", type="primary", on_click=go_to, args=("contact",))
