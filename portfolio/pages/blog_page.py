"""Blog index page."""

import streamlit as st
from ..content.blog_posts import search_posts
from ..i18n import use_translation
from ..ui.navigation import go_to
from ..ui.styling import UIStyles

class BlogPage:
    """Searchable list of published articles."""

    @staticmethod
    def render():
        """Render the blog index."""
        t = use_translation().t
        st.title(t("blog.title"))
        st.caption(t("blog.subtitle"))

        query = st.text_input(
            "search",
            placeholder=t("blog.searchPlaceholder"),
            label_visibility="collapsed",
        )
        posts = search_posts(query)

        if not posts:
            st.info(t("blog.noArticles"))
            return

        for post in posts:
            read_time = f" · {post.read_time} {t('blog.readTime')}" if post.read_time else ""
            st.markdown(
                f"<div class='card'><small class='muted'>{post.formatted_date()}{read_time}</small>"
                f"<h3>{post.title}</h3><p>{post.excerpt}</p>"
                f"{UIStyles.tags_html(post.tags)}</div>",
                unsafe_allow_html=True,
            )
            st.button(t("blog.readMore"), key=f"read_{post.slug}", on_click=go_to, args=("post", post.slug))
