"""Project data model."""

from typing import List, Optional
from pydantic import BaseModel, Field

class Project(BaseModel):
    """A portfolio project card."""
    id: int
    name: str
    description: str
    technologies: List[str] = Field(default_factory=list)
    demo_url: Optional[str] = None
    github_url: Optional[str] = None
    image_url: Optional[str] = None
    featured: bool = False

    @property
    def has_demo(self) -> bool:
        return bool(self.demo_url)
