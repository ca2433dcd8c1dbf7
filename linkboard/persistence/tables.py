"""SQLAlchemy table definitions for Linkboard.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    SmallInteger,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILES TABLE
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),  # Identity ID from the auth provider
    Column("display_name", String(255), nullable=False),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(200), nullable=False),
    Column("body", Text, nullable=True),
    Column("url", Text, nullable=True),
    Column(
        "author_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "status",
        Enum(
            "pending",
            "approved",
            "rejected",
            name="moderation_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column("vote_count", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Profiles that decided or voted on posts cannot be deleted
    Column(
        "moderator_id",
        UUID,
        ForeignKey("profiles.id", ondelete="RESTRICT"),
        nullable=True,
    ),
    Column("decided_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("char_length(title) >= 1", name="title_not_empty"),
    CheckConstraint(
        "body IS NULL OR char_length(body) <= 1000", name="body_max_length"
    ),
    CheckConstraint("comment_count >= 0", name="comment_count_non_negative"),
    CheckConstraint(
        "(status = 'pending') = (decided_at IS NULL)"
        " AND (status = 'pending') = (moderator_id IS NULL)",
        name="decision_recorded",
    ),
)

Index("idx_posts_status_created_at", posts_table.c.status, posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "voter_id", UUID, ForeignKey("profiles.id", ondelete="RESTRICT"), nullable=False
    ),
    Column("value", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Composite key: at most one live vote per voter per post
    PrimaryKeyConstraint("post_id", "voter_id", name="pk_votes"),
    CheckConstraint("value IN (1, -1)", name="vote_value_sign"),
)

Index("idx_votes_voter_id", votes_table.c.voter_id)
