"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from roost.domain.error import MaxDepthExceededError
from roost.domain.model.comment import MAX_COMMENT_DEPTH, Comment
from roost.domain.repository.comment import CommentRepository
from roost.domain.service.ranking import select_ordering
from roost.domain.value import CommentId, CommentSort, PostId

from .metrics import InMemoryCommentMetricsRepository
from .reaction import InMemoryReactionRepository


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Score based ordering reads the metrics repository it was given, and
    deletes cascade to the reaction repository it was given, the way the
    database foreign keys do.
    """

    def __init__(
        self,
        metrics_repository: InMemoryCommentMetricsRepository | None = None,
        reaction_repository: InMemoryReactionRepository | None = None,
    ) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._metrics = metrics_repository
        self._reactions = reaction_repository
        self.find_children_calls = 0

    def _published(self) -> list[Comment]:
        return [c for c in self._comments.values() if c.is_published]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(
        self,
        post_id: PostId,
        sort: CommentSort,
        limit: int,
        offset: int = 0,
    ) -> list[Comment]:
        """Find one page of top-level comments for a post."""
        comments = [
            c for c in self._published() if c.post_id == post_id and c.parent_id is None
        ]
        rule = select_ordering(sort)
        ordered = rule.apply(comments, self._metrics_of)
        return ordered[offset : offset + limit]

    def _metrics_of(self, comment_id: CommentId):
        if self._metrics is None:
            return None
        return self._metrics.get(comment_id)

    async def find_children(
        self, parent_ids: Sequence[CommentId], timeout: Optional[float] = None
    ) -> list[Comment]:
        """Find the direct children of several comments (answers immediately)."""
        self.find_children_calls += 1
        parents = set(parent_ids)
        children = [c for c in self._published() if c.parent_id in parents]
        children.sort(key=lambda c: c.created_at)
        return children

    async def find_replies(
        self,
        parent_id: CommentId,
        newest_first: bool = False,
        limit: Optional[int] = 20,
    ) -> list[Comment]:
        """Find direct replies to one comment."""
        replies = [c for c in self._published() if c.parent_id == parent_id]
        replies.sort(key=lambda c: c.created_at, reverse=newest_first)
        return replies if limit is None else replies[:limit]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count published comments for a post, replies included."""
        return sum(1 for c in self._published() if c.post_id == post_id)

    def _subtree_ids(self, comment_id: CommentId) -> list[CommentId]:
        found: list[CommentId] = []
        frontier = [comment_id]
        while frontier:
            parents = set(frontier)
            frontier = [
                c.id for c in self._comments.values() if c.parent_id in parents
            ]
            found.extend(frontier)
        return found

    async def count_descendants(self, comment_id: CommentId) -> int:
        """Count every comment below a comment."""
        return len(self._subtree_ids(comment_id))

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        if comment.depth > MAX_COMMENT_DEPTH:
            raise MaxDepthExceededError(MAX_COMMENT_DEPTH)
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and everything below it."""
        if comment_id not in self._comments:
            return
        removed = [comment_id, *self._subtree_ids(comment_id)]
        for removed_id in removed:
            self._comments.pop(removed_id, None)
        if self._reactions is not None:
            self._reactions.discard_comments(removed)
        if self._metrics is not None:
            self._metrics.discard_comments(removed)

    @property
    def all(self) -> list[Comment]:
        """Every stored comment, published or not."""
        return list(self._comments.values())
