"""Assembly of nested comment trees from flat rows."""

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional, Sequence

from roost.domain.model import Comment, CommentMetrics, ReactionCount, User
from roost.domain.value import CommentId, UserId

from .reply_expansion import ThreadRow


@dataclass
class CommentNode:
    """A comment with everything needed to render it and its replies."""

    comment: Comment
    depth: int
    author: Optional[User]
    reaction_counts: list[ReactionCount]
    metrics: Optional[CommentMetrics] = None
    replies: list["CommentNode"] = field(default_factory=list)


def build_comment_tree(
    rows: Sequence[ThreadRow],
    reactions: Mapping[CommentId, list[ReactionCount]],
    authors: Mapping[UserId, User],
    metrics: Optional[Mapping[CommentId, CommentMetrics]] = None,
) -> list[CommentNode]:
    """Link flat rows into trees.

    Nodes are indexed by ID first, then each node is attached to its
    parent. A node whose parent was not fetched becomes a root. Siblings
    keep the relative order they had in ``rows``.

    Args:
        rows: Fetched comments with their nesting level
        reactions: Reaction counts per comment
        authors: Authors keyed by user ID
        metrics: Metrics per comment; when given, every node carries
            metrics (zeroed when a comment has none)

    Returns:
        Root nodes in the order they appear in ``rows``
    """
    nodes: dict[CommentId, CommentNode] = {}
    for row in rows:
        comment = row.comment
        if comment.id in nodes:
            continue
        node_metrics = None
        if metrics is not None:
            node_metrics = metrics.get(comment.id) or CommentMetrics.empty(comment.id)
        nodes[comment.id] = CommentNode(
            comment=comment,
            depth=row.depth,
            author=authors.get(comment.author_id),
            reaction_counts=list(reactions.get(comment.id, [])),
            metrics=node_metrics,
        )

    roots: list[CommentNode] = []
    for node in nodes.values():
        parent_id = node.comment.parent_id
        parent = nodes.get(parent_id) if parent_id is not None else None
        if parent is None:
            roots.append(node)
        else:
            parent.replies.append(node)
    return roots


def sort_replies(nodes: Sequence[CommentNode], newest_first: bool) -> None:
    """Sort replies at every level by creation time, in place.

    Args:
        nodes: Root nodes
        newest_first: Descending instead of ascending order
    """
    stack = list(nodes)
    while stack:
        node = stack.pop()
        node.replies.sort(key=lambda n: n.comment.created_at, reverse=newest_first)
        stack.extend(node.replies)


def walk(nodes: Sequence[CommentNode]) -> Iterator[CommentNode]:
    """Yield every node depth first, parents before their replies."""
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.replies))
