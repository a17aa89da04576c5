import math
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

CHARS_PER_READ_UNIT = 200


def read_time(content: str) -> int:
    """Estimated reading time, one unit per 200 characters"""
    return math.ceil(len(content) / CHARS_PER_READ_UNIT)


class Comment(BaseModel):
    id: str
    author: str
    content: str


class Post(BaseModel):
    id: str
    title: str
    author: str
    publicationDate: datetime
    readTime: int
    content: str
    tags: List[str] = []
    likes: int = Field(default=0, ge=0)
    comments: List[Comment] = []


class PostRequest(BaseModel):
    title: Optional[str] = None
    author: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[Any] = None


class CommentRequest(BaseModel):
    author: Optional[str] = None
    content: Optional[str] = None


class CommentUpdateRequest(BaseModel):
    content: Optional[str] = None


class LikeRequest(BaseModel):
    unlike: Any = False
