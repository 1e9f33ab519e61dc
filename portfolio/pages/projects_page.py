"""Projects page."""

import pandas as pd
import streamlit as st
from ..content.projects import get_projects, technology_counts
from ..i18n import use_translation
from ..ui.styling import UIStyles

class ProjectsPage:
    """Project cards with an all/featured filter."""

    @staticmethod
    def _render_project(project, t):
        st.markdown(
            f"<div class='card'><h4>{'⭐ ' if project.featured else ''}{project.name}</h4>"
            f"<p>{project.description}</p>"
            f"<p class='muted'><b>{t('projects.techStack')}</b></p>"
            f"{UIStyles.tags_html(project.technologies)}</div>",
            unsafe_allow_html=True,
        )
        c1, c2 = st.columns(2)
        if project.has_demo:
            c1.link_button(t("projects.viewDemo"), project.demo_url)
        else:
            c1.button(t("projects.comingSoon"), key=f"soon_{project.id}", disabled=True)
        if project.github_url:
            c2.link_button(t("projects.viewCode"), project.github_url)

    @staticmethod
    def render():
        """Render the projects page."""
        t = use_translation().t
        st.title(t("projects.title"))
        st.caption(t("projects.subtitle"))

        labels = {"all": t("projects.allProjects"), "featured": t("projects.featured")}
        current = st.session_state.get("project_filter", "all")
        choice = st.radio(
            "filter",
            list(labels),
            index=list(labels).index(current) if current in labels else 0,
            format_func=labels.get,
            horizontal=True,
            label_visibility="collapsed",
        )
        st.session_state.project_filter = choice

        projects = get_projects(choice)
        cols = st.columns(2)
        for i, project in enumerate(projects):
            with cols[i % 2]:
                ProjectsPage._render_project(project, t)

        with st.expander(t("projects.techStack")):
            counts = technology_counts()
            df = pd.DataFrame({"technology": list(counts), "projects": list(counts.values())})
            st.dataframe(df, hide_index=True, use_container_width=True)
