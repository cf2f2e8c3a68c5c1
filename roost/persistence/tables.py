"""SQLAlchemy table definitions for Roost.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (display fields only, accounts live in the auth service)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(150), nullable=False, unique=True),
    Column("first_name", String(150), nullable=False, server_default=""),
    Column("last_name", String(150), nullable=False, server_default=""),
    Column("avatar_url", Text, nullable=True),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(300), nullable=False),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
)

Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("is_published", Boolean, nullable=False, server_default="true"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    Column("updated_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    Column("edited_at", TIMESTAMP, nullable=True),
    CheckConstraint("depth BETWEEN 0 AND 5", name="ck_comments_depth_range"),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 2000", name="ck_comments_content_length"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_created_at", comments_table.c.created_at)
Index(
    "idx_comments_post_top_level",
    comments_table.c.post_id,
    comments_table.c.created_at,
    postgresql_where=comments_table.c.parent_id.is_(None),
)

# Name of the CHECK constraint that bounds stored depth
DEPTH_CONSTRAINT = "ck_comments_depth_range"

# ============================================================================
# REACTIONS TABLE
# ============================================================================
reactions_table = Table(
    "reactions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "comment_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("emoji_name", String(50), nullable=False),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
)

Index("idx_reactions_comment_id", reactions_table.c.comment_id)
Index(
    "uq_reactions_comment_user_emoji",
    reactions_table.c.comment_id,
    reactions_table.c.user_id,
    reactions_table.c.emoji_name,
    unique=True,
)

# ============================================================================
# COMMENT METRICS TABLE (written by the analytics pipeline)
# ============================================================================
comment_metrics_table = Table(
    "comment_metrics",
    metadata,
    Column(
        "comment_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("reaction_count", Integer, nullable=False, server_default="0"),
    Column("deep_read_count", Integer, nullable=False, server_default="0"),
    Column("engagement_score", Float, nullable=True),
    Column("combined_algorithm_score", Float, nullable=True),
)

Index(
    "idx_comment_metrics_combined_score",
    comment_metrics_table.c.combined_algorithm_score,
)
Index("idx_comment_metrics_engagement_score", comment_metrics_table.c.engagement_score)

# ============================================================================
# COMMENT INTERACTIONS TABLE
# ============================================================================
comment_interactions_table = Table(
    "comment_interactions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "comment_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("interaction_type", String(20), nullable=False),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("session_id", String(255), nullable=True),
    Column("ip_address", String(45), nullable=True),
    Column("user_agent", Text, nullable=True),
    Column("metadata", JSONB, nullable=False, server_default="{}"),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    CheckConstraint(
        "interaction_type IN "
        "('view', 'reply', 'reaction', 'share', 'deep_read', 'quote')",
        name="ck_comment_interactions_type",
    ),
)

Index(
    "idx_comment_interactions_comment_type_created",
    comment_interactions_table.c.comment_id,
    comment_interactions_table.c.interaction_type,
    comment_interactions_table.c.created_at,
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "actor_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("type", String(50), nullable=False),
    Column("title", String(200), nullable=False),
    Column("message", Text, nullable=False),
    Column("entity_type", String(50), nullable=False),
    Column("entity_id", String(255), nullable=False),
    Column("action_url", Text, nullable=False),
    Column("priority", String(20), nullable=False, server_default="normal"),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
)

Index(
    "idx_notifications_user_created",
    notifications_table.c.user_id,
    notifications_table.c.created_at,
)
