"""Response items and helpers shared by the comment use cases."""

from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import BaseModel, StringConstraints

from roost.domain.error import ValidationError
from roost.domain.model import Comment, CommentMetrics, ReactionCount, User
from roost.domain.model.comment import MAX_CONTENT_LENGTH
from roost.domain.service import (
    CommentNode,
    ReactionService,
    ThreadRow,
    UserService,
    build_comment_tree,
)
from roost.domain.value import CommentId

# Comment text as accepted from clients: trimmed, then 1-2000 characters
CommentContent = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, min_length=1, max_length=MAX_CONTENT_LENGTH
    ),
]


def parse_id(value: str, field: str) -> UUID:
    """Parse a UUID string supplied by a client.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise ValidationError(f"{field} must be a valid UUID")


class AuthorItem(BaseModel):
    """Author display fields."""

    id: str
    username: str
    first_name: str
    last_name: str
    full_name: str
    avatar_url: str | None

    @classmethod
    def from_user(cls, user: User) -> "AuthorItem":
        return cls(
            id=str(user.id),
            username=user.username.root,
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            avatar_url=user.avatar_url,
        )


class ReactionCountItem(BaseModel):
    """Number of reactions with one emoji."""

    emoji_name: str
    count: int


class MetricsItem(BaseModel):
    """Engagement metrics shown with ranked comments."""

    view_count: int
    reply_count: int
    reaction_count: int
    algorithm_score: float | None

    @classmethod
    def from_metrics(cls, metrics: CommentMetrics) -> "MetricsItem":
        return cls(
            view_count=metrics.view_count,
            reply_count=metrics.reply_count,
            reaction_count=metrics.reaction_count,
            algorithm_score=metrics.combined_algorithm_score,
        )


class CommentItem(BaseModel):
    """Comment in responses, with its replies when the endpoint nests them."""

    id: str
    post_id: str
    user_id: str
    parent_id: str | None
    content: str
    preview: str
    is_published: bool
    is_edited: bool
    is_reply: bool
    created_at: datetime
    updated_at: datetime
    edited_at: datetime | None
    author: AuthorItem | None
    word_count: int
    reaction_counts: list[ReactionCountItem]
    depth: int
    replies: list["CommentItem"]
    metrics: MetricsItem | None = None


def to_comment_item(
    comment: Comment,
    preview_length: int,
    author: Optional[User] = None,
    reaction_counts: Optional[list[ReactionCount]] = None,
    depth: Optional[int] = None,
    replies: Optional[list[CommentItem]] = None,
    metrics: Optional[CommentMetrics] = None,
) -> CommentItem:
    """Render a comment for a response.

    Args:
        comment: The comment
        preview_length: Length of the content preview
        author: Author display fields, if known
        reaction_counts: Reaction counts, if aggregated
        depth: Nesting level to report (defaults to the stored depth)
        replies: Already rendered replies
        metrics: Metrics to show (ranked endpoints only)

    Returns:
        Response item
    """
    return CommentItem(
        id=str(comment.id),
        post_id=str(comment.post_id),
        user_id=str(comment.author_id),
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        content=comment.content,
        preview=comment.preview(preview_length),
        is_published=comment.is_published,
        is_edited=comment.is_edited,
        is_reply=comment.is_reply,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        edited_at=comment.edited_at,
        author=AuthorItem.from_user(author) if author else None,
        word_count=comment.word_count,
        reaction_counts=[
            ReactionCountItem(emoji_name=rc.emoji_name, count=rc.count)
            for rc in reaction_counts or []
        ],
        depth=comment.depth if depth is None else depth,
        replies=replies or [],
        metrics=MetricsItem.from_metrics(metrics) if metrics else None,
    )


def node_to_item(node: CommentNode, preview_length: int) -> CommentItem:
    """Render an assembled tree node and everything below it."""
    return to_comment_item(
        node.comment,
        preview_length,
        author=node.author,
        reaction_counts=node.reaction_counts,
        depth=node.depth,
        replies=[node_to_item(reply, preview_length) for reply in node.replies],
        metrics=node.metrics,
    )


async def assemble_thread(
    top_level: list[Comment],
    replies: list[ThreadRow],
    reaction_service: ReactionService,
    user_service: UserService,
    metrics: Optional[dict[CommentId, CommentMetrics]] = None,
) -> list[CommentNode]:
    """Decorate fetched comments and link them into trees.

    Args:
        top_level: Top-level comments in display order
        replies: Replies below them, as fetched
        reaction_service: Reaction aggregation
        user_service: Author lookup
        metrics: Metrics per comment, for ranked threads

    Returns:
        One tree per top-level comment
    """
    rows = [ThreadRow(comment=c, depth=0) for c in top_level] + replies
    comment_ids = [row.comment.id for row in rows]
    reactions = await reaction_service.aggregate(comment_ids)
    authors = await user_service.get_authors(row.comment.author_id for row in rows)
    return build_comment_tree(rows, reactions, authors, metrics)
