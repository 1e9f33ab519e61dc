"""Page navigation helpers backed by session state."""

import logging
import streamlit as st
from ..config.settings import DEFAULT_PAGE

logger = logging.getLogger(__name__)

PAGE_KEYS = ("home", "about", "projects", "blog", "post", "contact")

def go_to(page: str, slug: str = None):
    """Switch the current page. Meant for ``on_click`` callbacks."""
    st.session_state.page = page
    if page == "post":
        st.session_state.blog_slug = slug
    logger.debug(f"Navigate to {page}" + (f" ({slug})" if slug else ""))

def current_page() -> str:
    """The page to render, honouring a ``?page=`` link on first load."""
    if not st.session_state.get("_deep_link_checked"):
        st.session_state._deep_link_checked = True
        linked = st.query_params.get("page")
        if linked:
            st.session_state.page = linked
            slug = st.query_params.get("post")
            if slug:
                st.session_state.blog_slug = slug
    return st.session_state.get("page", DEFAULT_PAGE)
