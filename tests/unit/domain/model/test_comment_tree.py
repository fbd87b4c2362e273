"""Unit tests for Comment tree helpers."""

from forum.domain.model import Comment
from forum.domain.value import Author, CommentId, PostId

AUTHOR = Author(name="Test Author")


def _comment(comment_id: str, *replies: Comment, depth: int = 0) -> Comment:
    return Comment(
        id=CommentId(comment_id),
        post_id=PostId("p"),
        author=AUTHOR,
        content=comment_id,
        depth=depth,
        replies=list(replies),
    )


class TestCommentTree:
    """Tests for find, with_reply and thread_size."""

    def test_find_searches_subtree(self):
        tree = _comment("a", _comment("b", _comment("c", depth=2), depth=1))

        assert tree.find(CommentId("c")).id == "c"
        assert tree.find(CommentId("a")) is tree
        assert tree.find(CommentId("z")) is None

    def test_with_reply_returns_copy(self):
        """The input tree is left unchanged."""
        tree = _comment("a", _comment("b", depth=1))
        reply = _comment("new", depth=2)

        updated = tree.with_reply(CommentId("b"), reply)

        assert updated.replies[0].replies == [reply]
        assert tree.replies[0].replies == []

    def test_with_reply_unknown_parent(self):
        tree = _comment("a")

        assert tree.with_reply(CommentId("z"), _comment("new")) is None

    def test_thread_size_counts_all_levels(self):
        tree = _comment("a", _comment("b", _comment("c")), _comment("d"))

        assert tree.thread_size == 4
