"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from roost.domain.model.comment import Comment
from roost.domain.value import CommentId, CommentSort, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer. Every read except
    ``find_by_id`` only returns published comments.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, published or not.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        post_id: PostId,
        sort: CommentSort,
        limit: int,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one page of top-level comments for a post.

        Args:
            post_id: The post ID
            sort: Ordering of the top-level comments
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Published top-level comments in the requested order
        """
        pass

    @abstractmethod
    async def find_children(
        self, parent_ids: Sequence[CommentId], timeout: Optional[float] = None
    ) -> List[Comment]:
        """Find the direct children of several comments in one query.

        Args:
            parent_ids: Parent comment IDs
            timeout: Seconds the store may spend on the query, None for no limit

        Returns:
            Published children of any of the parents, oldest first

        Raises:
            QueryTimeoutError: If the query ran past ``timeout``
        """
        pass

    @abstractmethod
    async def find_replies(
        self,
        parent_id: CommentId,
        newest_first: bool = False,
        limit: Optional[int] = 20,
    ) -> List[Comment]:
        """Find direct replies to one comment.

        Args:
            parent_id: The parent comment ID
            newest_first: Order by creation time descending instead of ascending
            limit: Maximum number of replies to return, None for all

        Returns:
            Published direct replies
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count published comments for a post, replies included.

        Args:
            post_id: The post ID

        Returns:
            Number of comments in the whole thread
        """
        pass

    @abstractmethod
    async def count_descendants(self, comment_id: CommentId) -> int:
        """Count every comment below a comment, at any depth.

        Args:
            comment_id: Root of the subtree

        Returns:
            Number of descendants (the comment itself excluded)
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment

        Raises:
            MaxDepthExceededError: If the stored depth limit rejects the row
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment with all its descendants and their reactions.

        Args:
            comment_id: The comment ID to delete
        """
        pass
