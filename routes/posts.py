from typing import List, Dict, Any, Optional

from fastapi import APIRouter

from dependencies import Posts, Comments
from models.post import Post, Comment, PostRequest, CommentRequest, LikeRequest

router = APIRouter()


@router.get("")
async def get_posts(posts: Posts) -> List[Post]:
    """Get all posts in insertion order"""
    return posts.list_posts()


@router.get("/{post_id}")
async def get_post(posts: Posts, post_id: str) -> Post:
    return posts.get_post(post_id)


@router.post("", status_code=201)
async def create_post(posts: Posts, post_data: Optional[PostRequest] = None) -> Post:
    """Create a new post"""
    payload = post_data.model_dump() if post_data else {}
    return posts.create_post(payload)


@router.put("/{post_id}")
async def update_post(posts: Posts, post_id: str, post_data: Optional[PostRequest] = None) -> Post:
    """Update only the fields present in the request body"""
    partial = post_data.model_dump(exclude_unset=True) if post_data else {}
    return posts.update_post(post_id, partial)


@router.delete("/{post_id}")
async def delete_post(posts: Posts, post_id: str) -> Dict[str, Any]:
    posts.delete_post(post_id)
    return {"message": "Post deleted successfully"}


@router.post("/{post_id}/comment", status_code=201)
async def add_comment(
        comments: Comments,
        post_id: str,
        comment: Optional[CommentRequest] = None
) -> Post:
    """Add a comment to a post, responds with the whole post"""
    payload = comment.model_dump() if comment else {}
    return comments.add_comment(post_id, payload)


@router.get("/{post_id}/comments")
async def get_comments(comments: Comments, post_id: str) -> List[Comment]:
    return comments.list_comments(post_id)


@router.post("/{post_id}/like")
async def like_post(posts: Posts, post_id: str, like: Optional[LikeRequest] = None) -> Dict[str, Any]:
    """Like a post, or unlike it when the body carries a truthy `unlike`"""
    unlike = bool(like.unlike) if like else False
    return {"likes": posts.like_post(post_id, unlike=unlike)}
