import logging
from typing import Any, Dict, List, Optional, Tuple

from models.post import Comment, Post
from services.store import PostStore
from utils.errors import NotFound, ValidationError
from utils.validation import validate_comment

logger = logging.getLogger(__name__)

COMMENT_NOT_FOUND = "Comment not found"


class CommentService:
    """
    Comments live inside their post. Update and delete look a comment up by its id
    alone, scanning every post in store order and taking the first match, so they
    cost O(total comments).
    """

    def __init__(self, store: PostStore):
        self.store = store

    def _get_post(self, post_id: str) -> Post:
        post = self.store.find(post_id)
        if post is None:
            raise NotFound("Post not found")
        return post

    def _locate(self, comment_id: str) -> Optional[Tuple[Post, int]]:
        for post in self.store.all():
            for i, comment in enumerate(post.comments):
                if comment.id == comment_id:
                    return post, i
        return None

    def add_comment(self, post_id: str, payload: Dict[str, Any]) -> Post:
        """Append a comment to a post and return the updated post"""
        with self.store.lock:
            post = self._get_post(post_id)
            validate_comment(payload)
            comment = Comment(
                id=self.store.new_comment_id(post),
                author=payload["author"],
                content=payload["content"],
            )
            post.comments.append(comment)

        logger.info("Added comment %s to post %s", comment.id, post_id)
        return post

    def list_comments(self, post_id: str) -> List[Comment]:
        return self._get_post(post_id).comments

    def update_comment(self, comment_id: str, content: Optional[str]) -> Comment:
        # empty string is a valid new content, only a missing field is rejected
        if content is None:
            raise ValidationError("Missing required field: content")

        with self.store.lock:
            found = self._locate(comment_id)
            if found is None:
                raise NotFound(COMMENT_NOT_FOUND)
            post, index = found
            comment = post.comments[index]
            comment.content = content

        return comment

    def delete_comment(self, comment_id: str) -> None:
        with self.store.lock:
            found = self._locate(comment_id)
            if found is None:
                raise NotFound(COMMENT_NOT_FOUND)
            post, index = found
            del post.comments[index]
        logger.info("Deleted comment %s from post %s", comment_id, post.id)
