"""Post aggregate root.

Posts are questions, discussions or code reviews. Everything the store stamps
(id, timestamps, counters) lives on Post; everything the caller supplies lives
on PostDraft.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import Author, Difficulty, PostId, PostType


def _unique_tags(tags: list[str]) -> list[str]:
    """Collapse duplicate tags, keeping first-seen order."""
    return list(dict.fromkeys(tags))


class PostDraft(DomainModel):
    """Caller-supplied content of a new post.

    The author defaults to the configured actor when omitted.
    """

    title: str
    content: str
    code: Optional[str] = None
    language: Optional[str] = None
    author: Optional[Author] = None
    tags: list[str] = Field(default_factory=list)
    type: PostType = PostType.DISCUSSION
    difficulty: Optional[Difficulty] = None

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, v: list[str]) -> list[str]:
        """Tags have set semantics."""
        return _unique_tags(v)


class Post(DomainModel):
    """Post aggregate root.

    ``comment_count`` is a cache maintained by comment creation, not an
    independent source of truth.
    """

    id: PostId
    title: str
    content: str
    code: Optional[str] = None
    language: Optional[str] = None
    author: Author
    votes: int = 0  # May go negative
    comment_count: int = Field(default=0, ge=0)
    tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    type: PostType = PostType.DISCUSSION
    views: int = Field(default=0, ge=0)
    difficulty: Optional[Difficulty] = None

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, v: list[str]) -> list[str]:
        """Tags have set semantics."""
        return _unique_tags(v)
