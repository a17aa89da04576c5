from typing import Annotated

from fastapi import Request, Depends

from services.comments import CommentService
from services.posts import PostService
from utils.errors import StoreUninitialized


async def get_post_service(request: Request) -> PostService:
    """Get post service from app state"""
    service = getattr(request.app.state, "post_service", None)
    if service is None:
        raise StoreUninitialized()
    return service


async def get_comment_service(request: Request) -> CommentService:
    """Get comment service from app state"""
    service = getattr(request.app.state, "comment_service", None)
    if service is None:
        raise StoreUninitialized()
    return service


# Type annotations for dependency injection
Posts = Annotated[PostService, Depends(get_post_service)]
Comments = Annotated[CommentService, Depends(get_comment_service)]
