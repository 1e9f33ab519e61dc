"""Static site content: projects, blog posts and their markdown bodies."""

from .projects import PROJECTS, get_projects
from .blog_posts import BLOG_POSTS, published_posts, find_post, search_posts
from .markdown_loader import load_post_body, estimate_read_time
