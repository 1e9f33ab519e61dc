"""Data models."""

from .project import Project
from .blog_post import BlogPost
from .contact import ContactMessage, validation_message_key
