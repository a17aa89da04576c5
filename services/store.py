import logging
import threading
import uuid
from typing import List, Optional, Set

from models.post import Post

logger = logging.getLogger(__name__)


class PostStore:
    """
    In-memory, insertion-ordered collection of posts.
    Mutations must hold `lock` so readers never see a half-applied write.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self._posts: List[Post] = []
        self._issued_ids: Set[str] = set()

    def __len__(self) -> int:
        return len(self._posts)

    def all(self) -> List[Post]:
        return list(self._posts)

    def index_of(self, post_id: str) -> int:
        for i, post in enumerate(self._posts):
            if post.id == post_id:
                return i
        return -1

    def find(self, post_id: str) -> Optional[Post]:
        i = self.index_of(post_id)
        return self._posts[i] if i != -1 else None

    def new_post_id(self) -> str:
        """Generate a post id that has never been issued by this store"""
        post_id = str(uuid.uuid4())
        while post_id in self._issued_ids:
            post_id = str(uuid.uuid4())
        self._issued_ids.add(post_id)
        return post_id

    @staticmethod
    def new_comment_id(post: Post) -> str:
        """Generate a comment id unique within the given post"""
        taken = {comment.id for comment in post.comments}
        comment_id = str(uuid.uuid4())
        while comment_id in taken:
            comment_id = str(uuid.uuid4())
        return comment_id

    def append(self, post: Post) -> None:
        with self.lock:
            self._issued_ids.add(post.id)
            self._posts.append(post)

    def replace(self, index: int, post: Post) -> None:
        with self.lock:
            self._posts[index] = post

    def remove(self, index: int) -> Post:
        with self.lock:
            post = self._posts.pop(index)
        logger.debug("Removed post %s with %d comments", post.id, len(post.comments))
        return post
