from typing import List, Optional

from fastapi import APIRouter

from dependencies import Posts
from models.post import Post

router = APIRouter()


@router.get("/search")
async def search_posts(posts: Posts, q: Optional[str] = None) -> List[Post]:
    """Search titles and content, an empty query matches nothing"""
    return posts.search_posts(q)


@router.get("/filter")
async def filter_posts(posts: Posts, author: Optional[str] = None, tag: Optional[str] = None) -> List[Post]:
    """Filter posts by exact author and/or tag"""
    return posts.filter_posts(author=author, tag=tag)
