"""Create post use case."""

from pydantic import BaseModel

from forum.domain.model.post import Post, PostDraft
from forum.domain.service import PostService
from forum.domain.value import Author, Difficulty, PostType


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    code: str | None = None
    language: str | None = None
    author: Author | None = None  # Defaults to the actor
    tags: list[str] = []
    type: PostType = PostType.DISCUSSION
    difficulty: Difficulty | None = None


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: Post


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Posts are not moderated. Malformed drafts are not rejected beyond
        type validation.

        Args:
            request: Create post request

        Returns:
            Created post
        """
        draft = PostDraft(
            title=request.title,
            content=request.content,
            code=request.code,
            language=request.language,
            author=request.author,
            tags=request.tags,
            type=request.type,
            difficulty=request.difficulty,
        )
        post = await self.post_service.create_post(draft)
        return CreatePostResponse(post=post)
