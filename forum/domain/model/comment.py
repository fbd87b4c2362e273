"""Comment entity.

Comments are threaded discussions on posts. A top-level comment sits in the
store's comment collection; a reply sits in its parent's ``replies``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import Author, CommentId, PostId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, increments with each reply)
    - replies: Direct replies, oldest first
    """

    id: CommentId
    post_id: PostId
    author: Author
    content: str
    created_at: datetime = Field(default_factory=datetime.now)
    votes: int = 0
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    replies: list["Comment"] = Field(default_factory=list)

    def find(self, comment_id: CommentId) -> Optional["Comment"]:
        """Find a comment in this subtree (including self)."""
        if self.id == comment_id:
            return self
        for reply in self.replies:
            found = reply.find(comment_id)
            if found is not None:
                return found
        return None

    def with_reply(self, parent_id: CommentId, reply: "Comment") -> Optional["Comment"]:
        """Return a copy of this subtree with ``reply`` appended under ``parent_id``.

        Returns None when ``parent_id`` is not in this subtree.
        """
        if self.id == parent_id:
            return self.model_copy(update={"replies": [*self.replies, reply]})
        for index, child in enumerate(self.replies):
            updated = child.with_reply(parent_id, reply)
            if updated is not None:
                replies = list(self.replies)
                replies[index] = updated
                return self.model_copy(update={"replies": replies})
        return None

    @property
    def thread_size(self) -> int:
        """Number of comments in this subtree (including self)."""
        return 1 + sum(reply.thread_size for reply in self.replies)
