"""initial_schema

Create the Linkboard schema:
- Profiles (display name and admin flag per identity)
- Posts (moderated link/text submissions with a denormalized vote count)
- Votes (one +1/-1 vote per voter per post)

Revision ID: 3c1f0b7d92ae
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0b7d92ae"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE moderation_status AS ENUM ('pending', 'approved', 'rejected');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("body", sa.Text(), nullable=True),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending",
                "approved",
                "rejected",
                name="moderation_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("vote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("moderator_id", sa.UUID(), nullable=True),
        sa.Column("decided_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["author_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["moderator_id"], ["profiles.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("char_length(title) >= 1", name="title_not_empty"),
        sa.CheckConstraint(
            "body IS NULL OR char_length(body) <= 1000", name="body_max_length"
        ),
        sa.CheckConstraint("comment_count >= 0", name="comment_count_non_negative"),
        # A decided post records who decided it and when
        sa.CheckConstraint(
            "(status = 'pending') = (decided_at IS NULL)"
            " AND (status = 'pending') = (moderator_id IS NULL)",
            name="decision_recorded",
        ),
    )
    op.create_index(
        "idx_posts_status_created_at",
        "posts",
        ["status", sa.text("created_at DESC")],
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("voter_id", sa.UUID(), nullable=False),
        sa.Column("value", sa.SmallInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["voter_id"], ["profiles.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("post_id", "voter_id", name="pk_votes"),
        sa.CheckConstraint("value IN (1, -1)", name="vote_value_sign"),
    )
    op.create_index("idx_votes_voter_id", "votes", ["voter_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_voter_id", table_name="votes")
    op.drop_table("votes")
    op.drop_index("idx_posts_author_id", table_name="posts")
    op.drop_index("idx_posts_status_created_at", table_name="posts")
    op.drop_table("posts")
    op.drop_table("profiles")
    op.execute("DROP TYPE IF EXISTS moderation_status")
