"""Static catalog of portfolio projects."""

from typing import List
from ..models.project import Project

PROJECTS: List[Project] = [
    Project(
        id=1,
        name="Cloud-Native E-commerce Platform",
        description="A scalable microservices-based e-commerce platform built with Spring Boot, React, and deployed on Kubernetes. Features real-time inventory management, payment processing, and analytics dashboard.",
        technologies=["Java", "Spring Boot", "React", "Docker", "Kubernetes", "PostgreSQL", "Redis"],
        demo_url="https://demo.example.com",
        github_url="https://github.com/serhatsoysal/ecommerce-platform",
        image_url="images/project1.jpg",
        featured=True,
    ),
    Project(
        id=2,
        name="AI-Powered Code Review Tool",
        description="An intelligent code review assistant that uses OpenAI's API to analyze code quality, suggest improvements, and detect potential bugs. Integrated with GitHub webhooks for automated reviews.",
        technologies=["Python", "FastAPI", "OpenAI", "React", "PostgreSQL", "Docker"],
        demo_url="https://codereview.example.com",
        github_url="https://github.com/serhatsoysal/ai-code-review",
        image_url="images/project2.jpg",
        featured=True,
    ),
    Project(
        id=3,
        name="Real-time Chat Application",
        description="A modern chat application with real-time messaging, file sharing, and video calls. Built with WebSocket technology and scalable architecture to handle thousands of concurrent users.",
        technologies=["Node.js", "Socket.io", "React", "MongoDB", "WebRTC", "AWS"],
        demo_url="https://chat.example.com",
        github_url="https://github.com/serhatsoysal/realtime-chat",
        image_url="images/project3.jpg",
    ),
    Project(
        id=4,
        name="DevOps Monitoring Dashboard",
        description="A comprehensive monitoring solution for cloud infrastructure with custom metrics, alerting, and automated scaling. Supports multiple cloud providers and container orchestration platforms.",
        technologies=["Python", "Grafana", "Prometheus", "Docker", "Kubernetes", "Terraform"],
        github_url="https://github.com/serhatsoysal/devops-dashboard",
        image_url="images/project4.jpg",
    ),
    Project(
        id=5,
        name="Blockchain Voting System",
        description="A secure and transparent voting system built on blockchain technology. Features voter authentication, vote encryption, and real-time result tracking with immutable audit trails.",
        technologies=["Solidity", "Web3.js", "React", "Node.js", "IPFS", "MetaMask"],
        demo_url="https://voting.example.com",
        github_url="https://github.com/serhatsoysal/blockchain-voting",
        image_url="images/project5.jpg",
    ),
    Project(
        id=6,
        name="Machine Learning Model Deployment Platform",
        description="A platform for deploying and managing machine learning models at scale. Supports various ML frameworks, automatic scaling, and performance monitoring with A/B testing capabilities.",
        technologies=["Python", "TensorFlow", "Docker", "Kubernetes", "FastAPI", "MLflow"],
        github_url="https://github.com/serhatsoysal/ml-deployment",
        image_url="images/project6.jpg",
        featured=True,
    ),
]

def get_projects(project_filter: str = "all") -> List[Project]:
    """Projects for a filter: 'featured' or anything else for all."""
    if project_filter == "featured":
        return [p for p in PROJECTS if p.featured]
    return list(PROJECTS)

def technology_counts() -> dict:
    """How many projects use each technology, most used first."""
    counts = {}
    for project in PROJECTS:
        for tech in project.technologies:
            counts[tech] = counts.get(tech, 0) + 1
    return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))
