"""Ordering rules for top-level comments."""

from dataclasses import dataclass
from typing import Callable, Iterable, Literal, Optional

from roost.domain.model import Comment, CommentMetrics
from roost.domain.value import CommentId, CommentSort

ScoreField = Literal["combined_algorithm_score", "engagement_score"]


@dataclass(frozen=True)
class OrderingRule:
    """How a page of top-level comments is ordered.

    Chronological rules order by ``created_at`` only. Score rules order by
    a metrics column descending with missing scores last, and break ties
    with the newest comment first.
    """

    sort: CommentSort
    score_field: Optional[ScoreField] = None
    newest_first: bool = False

    @property
    def is_scored(self) -> bool:
        """Check if this rule orders by a metrics score."""
        return self.score_field is not None

    def score(self, metrics: Optional[CommentMetrics]) -> Optional[float]:
        """Read the score this rule orders by from a metrics row."""
        if metrics is None or self.score_field is None:
            return None
        return getattr(metrics, self.score_field)

    def apply(
        self,
        comments: Iterable[Comment],
        score_of: Callable[[CommentId], Optional[CommentMetrics]],
    ) -> list[Comment]:
        """Order comments in process.

        Args:
            comments: Comments to order
            score_of: Metrics lookup for a comment ID

        Returns:
            A new, ordered list
        """
        if not self.is_scored:
            return sorted(
                comments, key=lambda c: c.created_at, reverse=self.newest_first
            )

        # Stable sorts: tie-break first, then the primary key
        ordered = sorted(comments, key=lambda c: c.created_at, reverse=True)
        scores = {c.id: self.score(score_of(c.id)) for c in ordered}
        ordered.sort(
            key=lambda c: (
                scores[c.id] is None,
                -scores[c.id] if scores[c.id] is not None else 0.0,
            )
        )
        return ordered


_RULES: dict[CommentSort, OrderingRule] = {
    CommentSort.NEWEST: OrderingRule(CommentSort.NEWEST, newest_first=True),
    CommentSort.OLDEST: OrderingRule(CommentSort.OLDEST, newest_first=False),
    CommentSort.HOT: OrderingRule(CommentSort.HOT, "combined_algorithm_score"),
    CommentSort.TRENDING: OrderingRule(
        CommentSort.TRENDING, "combined_algorithm_score"
    ),
    CommentSort.BEST: OrderingRule(CommentSort.BEST, "engagement_score"),
}


def select_ordering(sort: CommentSort) -> OrderingRule:
    """Select the ordering rule for a sort key.

    Args:
        sort: Requested sort

    Returns:
        The matching ordering rule
    """
    return _RULES[CommentSort(sort)]
