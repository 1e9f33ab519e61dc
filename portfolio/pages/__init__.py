"""Pages module for the site's views."""

from .home_page import HomePage
from .about_page import AboutPage
from .projects_page import ProjectsPage
from .blog_page import BlogPage
from .blog_post_page import BlogPostPage
from .contact_page import ContactPage
from .not_found_page import NotFoundPage
