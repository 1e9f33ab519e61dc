"""
Portfolio - Main Application Entry Point

This module is the Streamlit entry point for the portfolio and technical blog.
Streamlit re-executes it top to bottom on every interaction, so it wires the
session together on each run and renders the requested page.

Architecture:
    1. Configuration Setup (config/)
    2. Internationalization (i18n/)
    3. UI Components (ui/)
    4. Page Routing (pages/)
    5. Site Content (content/, models/)

Flow:
    main() → configure → provide translations → sidebar → theme → route → footer

Run with:
    streamlit run app.py
"""

import streamlit as st

# Core configuration and setup components
from portfolio.config import PAGE_CONFIG, setup_logging, initialize_session_state
st.set_page_config(**PAGE_CONFIG)

# Internationalization support
from portfolio.i18n import provide_translation

# User interface and presentation components
from portfolio.ui import UIStyles, Sidebar, Header, Footer, current_page

# Site pages
from portfolio.pages import (
    HomePage,
    AboutPage,
    ProjectsPage,
    BlogPage,
    BlogPostPage,
    ContactPage,
    NotFoundPage,
)

PAGES = {
    "home": HomePage.render,
    "about": AboutPage.render,
    "projects": ProjectsPage.render,
    "blog": BlogPage.render,
    "contact": ContactPage.render,
}


def main():
    """
    Render one run of the application.

    1. Seeds session defaults (theme, page, blog selection)
    2. Initializes logging
    3. Establishes the session's translation context (first run only)
    4. Renders the sidebar, which may switch language or theme
    5. Applies the theme and the document's lang/dir attributes
    6. Routes to the selected page and renders the footer
    """
    initialize_session_state()

    logger = setup_logging()

    # Chooses the locale once per session: saved choice, browser, default
    i18n = provide_translation()

    page = current_page()
    logger.debug(f"Rendering page: {page} (locale: {i18n.current_code})")

    Sidebar().render(page)
    UIStyles.apply_theme(st.session_state.dark_mode, i18n.document)
    Header().render()

    if page == "post":
        BlogPostPage.render(st.session_state.get("blog_slug"))
    elif page in PAGES:
        PAGES[page]()
    else:
        logger.warning(f"Unknown page requested: {page}")
        NotFoundPage.render()

    Footer().render()


if __name__ == "__main__":
    main()
