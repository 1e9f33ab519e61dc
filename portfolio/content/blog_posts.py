"""Static catalog of blog post metadata."""

from datetime import date
from typing import List, Optional
from ..models.blog_post import BlogPost

BLOG_POSTS: List[BlogPost] = [
    BlogPost(
        id=1,
        title="Building Scalable Microservices with Spring Boot",
        slug="scalable-microservices-spring-boot",
        excerpt="Learn how to design and implement scalable microservices architecture using Spring Boot, Docker, and Kubernetes.",
        date=date(2024, 1, 15),
        tags=["Spring Boot", "Microservices", "Java", "Docker", "Kubernetes"],
        read_time=8,
    ),
    BlogPost(
        id=2,
        title="Modern Frontend Development with React and TypeScript",
        slug="modern-frontend-react-typescript",
        excerpt="A comprehensive guide to building modern web applications with React, TypeScript, and best practices for scalable frontend architecture.",
        date=date(2024, 1, 10),
        tags=["React", "TypeScript", "Frontend", "JavaScript"],
        read_time=12,
    ),
    BlogPost(
        id=3,
        title="Container Orchestration with Kubernetes: A Deep Dive",
        slug="kubernetes-container-orchestration",
        excerpt="Explore advanced Kubernetes concepts including custom controllers, operators, and production-ready deployment strategies.",
        date=date(2024, 1, 5),
        tags=["Kubernetes", "DevOps", "Containers", "Cloud Native"],
        read_time=15,
    ),
    BlogPost(
        id=4,
        title="AI Integration in Modern Applications",
        slug="ai-integration-modern-apps",
        excerpt="How to effectively integrate AI capabilities into your applications using OpenAI API and other machine learning services.",
        date=date(2024, 1, 1),
        tags=["AI", "OpenAI", "Machine Learning", "Python"],
        read_time=10,
    ),
    BlogPost(
        id=5,
        title="Database Design Patterns for High-Performance Applications",
        slug="database-design-patterns",
        excerpt="Explore advanced database design patterns and optimization techniques for building high-performance applications.",
        date=date(2023, 12, 25),
        tags=["Database", "PostgreSQL", "Performance", "Architecture"],
    ),
]

def published_posts() -> List[BlogPost]:
    """Published posts, newest first."""
    posts = [p for p in BLOG_POSTS if p.published]
    return sorted(posts, key=lambda p: p.date, reverse=True)

def find_post(slug: Optional[str]) -> Optional[BlogPost]:
    """Look up a published post by slug."""
    for post in BLOG_POSTS:
        if post.slug == slug and post.published:
            return post
    return None

def search_posts(query: str = "") -> List[BlogPost]:
    """Published posts whose title, excerpt or tags contain ``query``."""
    return [p for p in published_posts() if p.matches(query)]
