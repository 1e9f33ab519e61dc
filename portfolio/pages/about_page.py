"""About page."""

import streamlit as st
from ..i18n import use_translation

# Skill group catalog key -> technologies
SKILLS = {
    "about.skills.backend": ["Java", "Spring Boot", "Python", "FastAPI", "Node.js"],
    "about.skills.frontend": ["React", "TypeScript", "JavaScript", "Tailwind CSS"],
    "about.skills.cloud": ["AWS", "Docker", "Kubernetes", "Terraform", "CI/CD"],
    "about.skills.database": ["PostgreSQL", "MongoDB", "Redis"],
}

class AboutPage:
    """Biography, skills and working approach."""

    @staticmethod
    def render():
        """Render the about page."""
        t = use_translation().t
        st.title(t("about.title"))
        st.subheader(t("about.subtitle"))
        st.write(t("about.intro"))

        highlights = t("about.highlights")
        if isinstance(highlights, list):
            st.markdown("\n".join(f"- {item}" for item in highlights))

        st.header(t("about.background.title"))
        st.write(t("about.background.content"))

        st.header(t("about.skills.title"))
        cols = st.columns(2)
        for i, (label_key, technologies) in enumerate(SKILLS.items()):
            with cols[i % 2]:
                st.markdown(f"**{t(label_key)}**")
                st.write(", ".join(technologies))

        st.header(t("about.approach.title"))
        st.write(t("about.approach.content"))
