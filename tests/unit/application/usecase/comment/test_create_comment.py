"""Unit tests for CreateCommentUseCase."""

from uuid import UUID, uuid4

import pytest

from roost.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from roost.config import CommentSettings
from roost.domain.error import (
    InvalidParentError,
    MaxDepthExceededError,
    NotFoundError,
    ValidationError,
)
from roost.domain.repository import (
    CommentRepository,
    NotificationRepository,
    PostRepository,
    UserRepository,
)
from roost.domain.service import CommentService, NotificationService, UserService
from roost.domain.value import CommentId, NotificationType
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment_notifies_post_author(self, unit_env):
        """Creating a comment saves it and notifies the post author."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        notification_service = await unit_env.get(NotificationService)
        user_service = await unit_env.get(UserService)
        settings = await unit_env.get(CommentSettings)
        post_repo = await unit_env.get(PostRepository)
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        create_comment_use_case = CreateCommentUseCase(
            comment_service=comment_service,
            notification_service=notification_service,
            user_service=user_service,
            settings=settings,
        )

        author = make_user("kim")
        await user_repo.save(author)
        post = make_post()
        await post_repo.save(post)

        request = CreateCommentRequest(
            post_id=str(post.id),
            content="  Great post  ",
            author_id=str(author.id),
            author_username="kim",
        )

        # Act
        response = await create_comment_use_case.execute(request)

        # Assert
        assert response.message == "Comment created successfully"
        assert response.comment.content == "Great post"
        assert response.comment.depth == 0
        assert response.comment.author.username == "kim"
        assert response.comment.reaction_counts == []

        notifications = await notification_repo.find_by_user(post.author_id)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.COMMENT

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """Replies report their own message and depth."""
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()
        await post_repo.save(post)
        parent = make_comment(post.id)
        await comment_repo.save(parent)

        response = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                content="Agreed",
                author_id=str(uuid4()),
                author_username="lee",
                parent_id=str(parent.id),
            )
        )

        assert response.message == "Reply created successfully"
        assert response.comment.parent_id == str(parent.id)
        assert response.comment.depth == 1
        assert response.comment.is_reply is True

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_fail_creation(self, unit_env):
        """The comment is created even if notifying fails."""
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        notification_repo.fail_with = RuntimeError("notifications down")
        post = make_post()
        await post_repo.save(post)

        response = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                content="Still here",
                author_id=str(uuid4()),
                author_username="mia",
            )
        )

        stored = await comment_repo.find_by_id(CommentId(UUID(response.comment.id)))
        assert stored is not None

    @pytest.mark.asyncio
    async def test_reply_to_depth_five_is_rejected(self, unit_env):
        """A sixth level is refused before anything is saved."""
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()
        await post_repo.save(post)
        deepest = make_comment(post.id, depth=5, parent_id=CommentId(uuid4()))
        await comment_repo.save(deepest)

        with pytest.raises(MaxDepthExceededError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(post.id),
                    content="Too deep",
                    author_id=str(uuid4()),
                    author_username="ned",
                    parent_id=str(deepest.id),
                )
            )

        assert len(comment_repo.all) == 1

    @pytest.mark.asyncio
    async def test_parent_on_other_post_is_rejected(self, unit_env):
        """Replies must stay on the parent's post."""
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post, other = make_post(), make_post()
        await post_repo.save(post)
        await post_repo.save(other)
        parent = make_comment(other.id)
        await comment_repo.save(parent)

        with pytest.raises(InvalidParentError):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(post.id),
                    content="Wrong thread",
                    author_id=str(uuid4()),
                    author_username="olga",
                    parent_id=str(parent.id),
                )
            )

    @pytest.mark.asyncio
    async def test_nonexistent_post_raises_error(self, unit_env):
        """Creating comment for non-existent post should raise error."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError, match="Post not found"):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()),
                    content="Hello",
                    author_id=str(uuid4()),
                    author_username="pat",
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_parent_id_raises_validation_error(self, unit_env):
        """IDs are validated before the store is touched."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError, match="parent_id"):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()),
                    content="Hello",
                    author_id=str(uuid4()),
                    author_username="quinn",
                    parent_id="nope",
                )
            )
