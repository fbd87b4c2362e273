"""Unit tests for CommentService."""

import pytest

from forum.domain.model import PostDraft
from forum.domain.repository import CommentRepository
from forum.domain.service import CommentService, PostService
from forum.domain.value import CommentId, PostId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create_post(unit_env, title: str = "Post") -> PostId:
    post_service = await unit_env.get(PostService)
    post = await post_service.create_post(PostDraft(title=title, content="c"))
    return post.id


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_top_level_with_depth_zero(self, unit_env):
        """Top-level comment should have depth 0 and no parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = await _create_post(unit_env)

        # Act
        result = await comment_service.create_comment(post_id=post_id, content="Hi")

        # Assert
        assert result.depth == 0
        assert result.parent_id is None
        assert result.replies == []
        assert result.content == "Hi"
        assert result.author.name == "Current User"

        saved = await comment_repo.find_by_id(result.id)
        assert saved is not None

    @pytest.mark.asyncio
    async def test_top_level_comments_newest_first(self, unit_env):
        """Top-level comments are prepended."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_id = await _create_post(unit_env)

        # Act
        first = await comment_service.create_comment(post_id=post_id, content="1")
        second = await comment_service.create_comment(post_id=post_id, content="2")

        # Assert
        comments = await comment_service.get_comments_for_post(post_id)
        assert [c.id for c in comments] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_replies_appended_in_order(self, unit_env):
        """Replies go under their parent, oldest first."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_id = await _create_post(unit_env)
        parent = await comment_service.create_comment(post_id=post_id, content="root")

        # Act
        r1 = await comment_service.create_comment(
            post_id=post_id, content="r1", parent_id=parent.id
        )
        r2 = await comment_service.create_comment(
            post_id=post_id, content="r2", parent_id=parent.id
        )

        # Assert
        assert r1.depth == 1
        assert r1.parent_id == parent.id
        comments = await comment_service.get_comments_for_post(post_id)
        assert len(comments) == 1
        assert [r.id for r in comments[0].replies] == [r1.id, r2.id]

    @pytest.mark.asyncio
    async def test_reply_to_nested_reply(self, unit_env):
        """A reply can target a comment at any depth."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_id = await _create_post(unit_env)
        root = await comment_service.create_comment(post_id=post_id, content="root")
        child = await comment_service.create_comment(
            post_id=post_id, content="child", parent_id=root.id
        )

        # Act
        grandchild = await comment_service.create_comment(
            post_id=post_id, content="grandchild", parent_id=child.id
        )

        # Assert
        assert grandchild.depth == 2
        assert grandchild.parent_id == child.id
        comments = await comment_service.get_comments_for_post(post_id)
        assert comments[0].replies[0].replies[0].id == grandchild.id
        assert await comment_service.count_comments_for_post(post_id) == 3

    @pytest.mark.asyncio
    async def test_unknown_parent_falls_back_to_top_level(self, unit_env):
        """A reply to a missing parent is kept as a top-level comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_id = await _create_post(unit_env)

        # Act
        result = await comment_service.create_comment(
            post_id=post_id, content="orphan", parent_id=CommentId("missing")
        )

        # Assert
        assert result.parent_id is None
        assert result.depth == 0
        comments = await comment_service.get_comments_for_post(post_id)
        assert [c.id for c in comments] == [result.id]

    @pytest.mark.asyncio
    async def test_parent_on_other_post_falls_back_to_top_level(self, unit_env):
        """A parent from another post is not used."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_a = await _create_post(unit_env, "a")
        post_b = await _create_post(unit_env, "b")
        parent = await comment_service.create_comment(post_id=post_a, content="on a")

        # Act
        result = await comment_service.create_comment(
            post_id=post_b, content="on b", parent_id=parent.id
        )

        # Assert
        assert result.parent_id is None
        assert result.post_id == post_b
        on_a = await comment_service.get_comments_for_post(post_a)
        assert on_a[0].replies == []

    @pytest.mark.asyncio
    async def test_comments_scoped_to_post(self, unit_env):
        """get_comments_for_post only returns that post's threads."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_a = await _create_post(unit_env, "a")
        post_b = await _create_post(unit_env, "b")
        await comment_service.create_comment(post_id=post_a, content="a1")

        # Act
        comments = await comment_service.get_comments_for_post(post_b)

        # Assert
        assert comments == []


class TestGetCommentById:
    """Tests for get_comment_by_id method."""

    @pytest.mark.asyncio
    async def test_finds_nested_reply(self, unit_env):
        """Lookup searches replies too."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_id = await _create_post(unit_env)
        root = await comment_service.create_comment(post_id=post_id, content="root")
        reply = await comment_service.create_comment(
            post_id=post_id, content="reply", parent_id=root.id
        )

        # Act
        found = await comment_service.get_comment_by_id(reply.id)
        missing = await comment_service.get_comment_by_id(CommentId("nope"))

        # Assert
        assert found == reply
        assert missing is None
