"""SQLAlchemy table definitions for the discussion service.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE (owned by the posts module; only comment_count is written here)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("author_id", UUID, nullable=False),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())

# ============================================================================
# REVIEWS TABLE (owned by the reviews module; only comment_count is written here)
# ============================================================================
reviews_table = Table(
    "reviews",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("author_id", UUID, nullable=False),
    Column("body", Text, nullable=False),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_reviews_created_at", reviews_table.c.created_at.desc())

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "parent_kind",
        postgresql.ENUM("post", "review", name="parent_kind", create_type=False),
        nullable=False,
    ),
    # Polymorphic reference: posts.id or reviews.id depending on parent_kind
    Column("parent_id", UUID, nullable=False),
    Column(
        "parent_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="RESTRICT"),
        nullable=True,
    ),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("author_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("char_length(content) >= 1", name="content_not_empty"),
    CheckConstraint("depth >= 0", name="depth_not_negative"),
)

# Thread listing: all rows of one parent in creation order
Index(
    "idx_comments_thread",
    comments_table.c.parent_kind,
    comments_table.c.parent_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)
Index(
    "idx_comments_author_created_at",
    comments_table.c.author_id,
    comments_table.c.created_at.desc(),
)

# ============================================================================
# COMMENT VOTES TABLE
# ============================================================================
comment_votes_table = Table(
    "comment_votes",
    metadata,
    Column("voter_id", UUID, nullable=False),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "polarity",
        postgresql.ENUM("UPVOTE", "DOWNVOTE", name="vote_polarity", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("voter_id", "comment_id", name="uq_comment_vote"),
)

Index("idx_comment_votes_comment_id", comment_votes_table.c.comment_id)
