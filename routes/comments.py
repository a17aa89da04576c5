from typing import Dict, Any, Optional

from fastapi import APIRouter

from dependencies import Comments
from models.post import Comment, CommentUpdateRequest

router = APIRouter()


@router.put("/{comment_id}")
async def update_comment(
        comments: Comments,
        comment_id: str,
        update: Optional[CommentUpdateRequest] = None
) -> Comment:
    """Replace the content of a comment, wherever it lives"""
    content = update.content if update else None
    return comments.update_comment(comment_id, content)


@router.delete("/{comment_id}")
async def delete_comment(comments: Comments, comment_id: str) -> Dict[str, Any]:
    comments.delete_comment(comment_id)
    return {"message": "Comment deleted successfully"}
