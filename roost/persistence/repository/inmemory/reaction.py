"""In-memory reaction repository for testing."""

from collections import Counter
from typing import Iterable, Sequence

from roost.domain.model import Reaction, ReactionCount
from roost.domain.repository.reaction import ReactionRepository
from roost.domain.value import CommentId


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing."""

    def __init__(self) -> None:
        self._reactions: list[Reaction] = []
        self.fail_with: Exception | None = None
        self.count_calls = 0

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, list[ReactionCount]]:
        """Count reactions per emoji for several comments."""
        self.count_calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        wanted = set(comment_ids)
        counter = Counter(
            (r.comment_id, r.emoji_name.root)
            for r in self._reactions
            if r.comment_id in wanted
        )
        counts: dict[CommentId, list[ReactionCount]] = {}
        for (comment_id, emoji_name), n in counter.most_common():
            counts.setdefault(comment_id, []).append(
                ReactionCount(emoji_name=emoji_name, count=n)
            )
        return counts

    async def find_by_comment(self, comment_id: CommentId) -> list[Reaction]:
        """Find every reaction row of a comment."""
        return [r for r in self._reactions if r.comment_id == comment_id]

    async def save(self, reaction: Reaction) -> Reaction:
        """Save a reaction."""
        self._reactions.append(reaction)
        return reaction

    def discard_comments(self, comment_ids: Iterable[CommentId]) -> None:
        """Drop reactions of deleted comments."""
        removed = set(comment_ids)
        self._reactions = [r for r in self._reactions if r.comment_id not in removed]
