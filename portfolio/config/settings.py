"""Application settings and constants."""

import os
import streamlit as st

# Visual Theme
PRIMARY = "#2563EB"  # Accent for links, active nav and tags

LIGHT_THEME = {
    "bg": "#FFFFFF",
    "surface": "#F9FAFB",
    "text": "#111827",
    "muted": "#4B5563",
    "border": "#E5E7EB",
}

DARK_THEME = {
    "bg": "#0F172A",
    "surface": "#1E293B",
    "text": "#F3F4F6",
    "muted": "#9CA3AF",
    "border": "#334155",
}

# Site owner
AUTHOR_NAME = "Serhat Soysal"
CONTACT_EMAIL = "serhat@serhatsoysal.com"

SOCIAL_LINKS = [
    {"name": "GitHub", "url": "https://github.com/serhatsoysal"},
    {"name": "LinkedIn", "url": "https://linkedin.com/in/soysalserhat"},
    {"name": "Twitter", "url": "https://twitter.com/serhatsoysalx"},
    {"name": "Email", "url": f"mailto:{CONTACT_EMAIL}"},
]

# Figures shown on the home page that are not derived from content
YEARS_EXPERIENCE = 5
HAPPY_CLIENTS = 20

# Localization
STORAGE_KEY = "preferred-language"

# Where the language choice is remembered: "query" (per visitor, in the URL)
# or "file" (assets/preferences.json, shared by all sessions)
PREFERENCES_BACKEND = os.getenv("PORTFOLIO_PREFERENCES", "query")

# Navigation: page key -> catalog key of its label
NAV_ITEMS = [
    ("home", "nav.home"),
    ("about", "nav.about"),
    ("projects", "nav.projects"),
    ("blog", "nav.blog"),
    ("contact", "nav.contact"),
]

DEFAULT_PAGE = "home"

def initialize_session_state():
    """Initialize session state defaults. Call after st.set_page_config()."""
    if "dark_mode" not in st.session_state:
        st.session_state.dark_mode = False

    if "page" not in st.session_state:
        st.session_state.page = DEFAULT_PAGE

    if "blog_slug" not in st.session_state:
        st.session_state.blog_slug = None

    if "project_filter" not in st.session_state:
        st.session_state.project_filter = "all"

# Page configuration
PAGE_CONFIG = {
    "page_title": f"{AUTHOR_NAME} | Full-Stack Software Engineer",
    "page_icon": "💻",
    "layout": "wide",
    "initial_sidebar_state": "expanded",
}
