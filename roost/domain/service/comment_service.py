"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from roost.config import CommentSettings
from roost.domain.error import (
    InvalidParentError,
    MaxDepthExceededError,
    NotAuthorizedError,
    NotFoundError,
)
from roost.domain.model import Comment, Post
from roost.domain.repository import CommentRepository, PostRepository
from roost.domain.value import CommentId, CommentSort, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository (existence checks)
            settings: Comment settings (creation depth limit)
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.settings = settings

    async def get_post(self, post_id: PostId) -> Post:
        """Get the post a thread belongs to.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("comment_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a published comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment does not exist or is unpublished
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or not comment.is_published:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Checks run in order and stop at the first failure: the post exists,
        the parent exists, the parent is on the same post, the reply is not
        nested too deep.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment content
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post or parent comment does not exist
            InvalidParentError: If the parent belongs to another post
            MaxDepthExceededError: If the reply would be nested too deep
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            await self.get_post(post_id)

            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise InvalidParentError(str(parent_id), str(post_id))
                depth = parent.depth + 1
                if depth > self.settings.max_creation_depth:
                    logfire.warn(
                        "Maximum comment depth exceeded",
                        parent_id=str(parent_id),
                        depth=depth,
                        max_depth=self.settings.max_creation_depth,
                    )
                    raise MaxDepthExceededError(self.settings.max_creation_depth)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                depth=depth,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
            )
            return saved

    async def update_content(
        self, comment_id: CommentId, user_id: UserId, content: str
    ) -> Comment:
        """Replace the content of a comment.

        Args:
            comment_id: Comment ID
            user_id: User requesting the edit
            content: New content

        Returns:
            The edited comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            comment = await self.get_comment(comment_id)
            if comment.author_id != user_id:
                logfire.warn(
                    "Comment edit by non-author",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            now = datetime.now()
            edited = comment.evolve(
                content=content, is_edited=True, edited_at=now, updated_at=now
            )
            saved = await self.comment_repository.save(edited)
            logfire.info(
                "Comment content updated",
                comment_id=str(comment_id),
                post_id=str(saved.post_id),
                content_length=len(saved.content),
            )
            return saved

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> int:
        """Delete a comment together with every reply below it.

        Args:
            comment_id: Comment ID
            user_id: User requesting the deletion

        Returns:
            Number of replies deleted along with the comment, at any depth

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            if comment.author_id != user_id:
                logfire.warn(
                    "Comment deletion by non-author",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))

            descendants = await self.comment_repository.count_descendants(comment_id)
            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                deleted_replies=descendants,
            )
            return descendants

    async def get_top_level(
        self, post_id: PostId, sort: CommentSort, limit: int, offset: int = 0
    ) -> list[Comment]:
        """Get one page of top-level comments of a post.

        Args:
            post_id: Post ID
            sort: Ordering of the page
            limit: Page size
            offset: Number of comments to skip

        Returns:
            Published top-level comments
        """
        with logfire.span(
            "comment_service.get_top_level",
            post_id=str(post_id),
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            comments = await self.comment_repository.find_top_level(
                post_id, sort, limit, offset
            )
            logfire.info(
                "Top-level comments retrieved",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def count_thread(self, post_id: PostId) -> int:
        """Count every published comment of a post, replies included."""
        return await self.comment_repository.count_by_post(post_id)

    async def get_direct_replies(
        self,
        parent_id: CommentId,
        newest_first: bool = False,
        limit: int | None = 20,
    ) -> list[Comment]:
        """Get the published replies directly below a comment.

        Args:
            parent_id: Parent comment ID
            newest_first: Descending creation order
            limit: Maximum number of replies, None for all

        Returns:
            Replies without their own replies
        """
        with logfire.span(
            "comment_service.get_direct_replies",
            parent_id=str(parent_id),
            limit=limit,
        ):
            return await self.comment_repository.find_replies(
                parent_id, newest_first=newest_first, limit=limit
            )
