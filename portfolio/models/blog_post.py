"""Blog post metadata model."""

import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

class BlogPost(BaseModel):
    """Metadata for one blog article; the body lives in a markdown file."""
    id: int
    title: str
    slug: str
    excerpt: str
    date: datetime.date
    tags: List[str] = Field(default_factory=list)
    read_time: Optional[int] = None  # minutes; estimated from the body when unset
    published: bool = True

    def matches(self, query: str) -> bool:
        """Case-insensitive match against title, excerpt and tags."""
        needle = (query or "").strip().lower()
        if not needle:
            return True
        haystack = [self.title, self.excerpt, *self.tags]
        return any(needle in text.lower() for text in haystack)

    def formatted_date(self) -> str:
        """Publication date as e.g. 'January 15, 2024'."""
        return f"{self.date.strftime('%B')} {self.date.day}, {self.date.year}"
