"""Single blog post page."""

import logging
import streamlit as st
from ..content.blog_posts import find_post
from ..content.markdown_loader import estimate_read_time, load_post_body
from ..i18n import use_translation
from ..ui.navigation import go_to
from ..ui.styling import UIStyles

logger = logging.getLogger(__name__)

class BlogPostPage:
    """Full article rendered from its markdown body."""

    @staticmethod
    def _render_not_found(t):
        st.title(t("blog.notFound"))
        st.write(t("blog.notFoundDescription"))
        st.button(t("blog.backToBlog"), key="missing_back", on_click=go_to, args=("blog",))

    @staticmethod
    def render(slug: str):
        """Render the post identified by ``slug``."""
        t = use_translation().t
        post = find_post(slug)
        if post is None:
            logger.info(f"Unknown blog post requested: {slug!r}")
            BlogPostPage._render_not_found(t)
            return

        st.button(f"← {t('blog.backToBlog')}", key="post_back", on_click=go_to, args=("blog",))

        with st.spinner(t("common.loading")):
            body = load_post_body(post.slug)
        read_time = post.read_time or estimate_read_time(body)

        st.caption(f"{t('blog.publishedOn')} {post.formatted_date()} · {read_time} {t('blog.readTime')}")
        st.title(post.title)
        st.markdown(UIStyles.tags_html(post.tags), unsafe_allow_html=True)
        st.markdown("---")

        # st.markdown renders GitHub-flavoured markdown and highlights fenced code
        st.markdown(body)

        st.markdown("---")
        st.subheader(t("blog.thanks.title"))
        st.write(t("blog.thanks.description"))
        c1, c2 = st.columns(2)
        c1.button(t("blog.thanks.moreArticles"), type="primary", on_click=go_to, args=("blog",))
        c2.button(t("home.hero.cta.getInTouch"), on_click=go_to, args=("contact",))
