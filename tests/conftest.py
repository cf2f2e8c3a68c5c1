"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from roost.domain.model import Comment, CommentMetrics, Post, Reaction, User
from roost.domain.value import (
    CommentId,
    EmojiName,
    PostId,
    ReactionId,
    UserId,
    Username,
)

# Fixed reference time so ordering assertions never depend on the clock
BASE_TIME = datetime(2025, 1, 1, 12, 0, 0)


def make_user(username: str = "alice", **overrides) -> User:
    """Build a user with sensible defaults."""
    fields = {
        "id": UserId(uuid4()),
        "username": Username(username),
        "first_name": "",
        "last_name": "",
        "avatar_url": None,
    }
    fields.update(overrides)
    return User(**fields)


def make_post(author_id: Optional[UserId] = None, title: str = "Test Post") -> Post:
    """Build a post."""
    return Post(
        id=PostId(uuid4()),
        author_id=author_id or UserId(uuid4()),
        title=title,
        created_at=BASE_TIME,
    )


def make_comment(
    post_id: PostId,
    parent: Optional[Comment] = None,
    author_id: Optional[UserId] = None,
    content: str = "Test comment",
    minutes: int = 0,
    **overrides,
) -> Comment:
    """Build a comment, nested below ``parent`` when given.

    Args:
        post_id: Post the comment belongs to
        parent: Parent comment (depth is parent depth + 1)
        author_id: Author, random when omitted
        content: Comment text
        minutes: Offset from ``BASE_TIME`` for created_at
        **overrides: Any other Comment field
    """
    created_at = BASE_TIME + timedelta(minutes=minutes)
    fields = {
        "id": CommentId(uuid4()),
        "post_id": post_id,
        "author_id": author_id or UserId(uuid4()),
        "content": content,
        "parent_id": parent.id if parent else None,
        "depth": parent.depth + 1 if parent else 0,
        "created_at": created_at,
        "updated_at": created_at,
    }
    fields.update(overrides)
    return Comment(**fields)


def make_reaction(
    comment_id: CommentId, emoji_name: str, user_id: Optional[UserId] = None
) -> Reaction:
    """Build a reaction."""
    return Reaction(
        id=ReactionId(uuid4()),
        comment_id=comment_id,
        user_id=user_id or UserId(uuid4()),
        emoji_name=EmojiName(emoji_name),
        created_at=BASE_TIME,
    )


def make_metrics(
    comment_id: CommentId, score: Optional[float] = None, **overrides
) -> CommentMetrics:
    """Build a metrics row with the combined score set."""
    fields = {"comment_id": comment_id, "combined_algorithm_score": score}
    fields.update(overrides)
    return CommentMetrics(**fields)
