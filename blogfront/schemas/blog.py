import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    date: Optional[datetime.date] = None
    author: Optional[str] = None
    slug: Optional[str] = None


class PostDetail(PostSummary):
    tags: List[str] = Field(default_factory=list)
    content: str  # Rendered HTML, trusted because posts are repository files
