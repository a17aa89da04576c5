import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from models.post import Post, read_time
from services.store import PostStore
from utils.errors import NotFound
from utils.validation import coerce_tags, validate_post

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "Post not found"
UPDATABLE_FIELDS = ("title", "author", "content")


class PostService:
    def __init__(self, store: PostStore):
        self.store = store

    def list_posts(self) -> List[Post]:
        return self.store.all()

    def get_post(self, post_id: str) -> Post:
        post = self.store.find(post_id)
        if post is None:
            raise NotFound(POST_NOT_FOUND)
        return post

    def create_post(self, payload: Dict[str, Any]) -> Post:
        """Validate the payload and append a new post to the store"""
        validate_post(payload)

        with self.store.lock:
            post = Post(
                id=self.store.new_post_id(),
                title=payload["title"],
                author=payload["author"],
                publicationDate=datetime.now(timezone.utc),
                readTime=read_time(payload["content"]),
                content=payload["content"],
                tags=coerce_tags(payload.get("tags")),
                likes=0,
                comments=[],
            )
            self.store.append(post)

        logger.info("Created post %s", post.id)
        return post

    def update_post(self, post_id: str, partial: Dict[str, Any]) -> Post:
        """
        Merge the supplied fields over the stored post.
        Only title, author, content and tags can change; id, likes, comments and
        publicationDate are carried over. readTime follows content.
        """
        with self.store.lock:
            index = self.store.index_of(post_id)
            if index == -1:
                raise NotFound(POST_NOT_FOUND)
            post = self.store.all()[index]

            changes: Dict[str, Any] = {
                field: partial[field]
                for field in UPDATABLE_FIELDS
                if partial.get(field) is not None
            }
            if "content" in changes:
                changes["readTime"] = read_time(changes["content"])
            if "tags" in partial:
                changes["tags"] = coerce_tags(partial["tags"])

            updated = post.model_copy(update=changes)
            self.store.replace(index, updated)

        return updated

    def delete_post(self, post_id: str) -> None:
        with self.store.lock:
            index = self.store.index_of(post_id)
            if index == -1:
                raise NotFound(POST_NOT_FOUND)
            self.store.remove(index)
        logger.info("Deleted post %s", post_id)

    def search_posts(self, query: Optional[str]) -> List[Post]:
        """Case-insensitive substring search over title and content"""
        if not query:
            return []
        term = query.lower()
        return [
            post for post in self.store.all()
            if term in post.title.lower() or term in post.content.lower()
        ]

    def filter_posts(self, author: Optional[str] = None, tag: Optional[str] = None) -> List[Post]:
        """Exact author and/or tag match; both criteria must hold when both are given"""
        if not author and not tag:
            return []

        matches = []
        for post in self.store.all():
            if author and post.author != author:
                continue
            if tag and tag not in post.tags:
                continue
            matches.append(post)
        return matches

    def like_post(self, post_id: str, unlike: bool = False) -> int:
        """Increment or decrement the like count (never below zero) and return it"""
        with self.store.lock:
            post = self.get_post(post_id)
            if unlike:
                post.likes = max(post.likes - 1, 0)
            else:
                post.likes += 1
            return post.likes
