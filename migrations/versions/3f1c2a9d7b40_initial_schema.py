"""initial_schema

Create the PromptHub schema:
- Users (email and password accounts)
- Posts (published prompts with comma-delimited tags)
- Comments (nested replies with cached reply counts)
- Post likes (one per user and post)
- Prompts (private prompt library)

Live rows carry the sentinel 9999-12-31 23:59:59.999 UTC in deleted_at.

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-03-02 10:12:44.218305

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SENTINEL = sa.text("'9999-12-31 23:59:59.999+00'")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "deleted_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=SENTINEL,
        ),
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
    ]


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("phone", sa.String(20), nullable=True),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="USER"),
        sa.Column("status", sa.String(20), nullable=False, server_default="ACTIVE"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", "deleted_at", name="uq_users_email_deleted_at"),
        sa.UniqueConstraint("phone", "deleted_at", name="uq_users_phone_deleted_at"),
        sa.CheckConstraint("role IN ('USER', 'ADMIN')", name="ck_users_role"),
        sa.CheckConstraint("status IN ('ACTIVE', 'DISABLED')", name="ck_users_status"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        _id(),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("tags", sa.Text(), nullable=False, server_default=""),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("fork_count", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("status IN ('active', 'hidden')", name="ck_posts_status"),
        sa.CheckConstraint("like_count >= 0", name="ck_posts_like_count"),
        sa.CheckConstraint("comment_count >= 0", name="ck_posts_comment_count"),
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])
    op.create_index("idx_posts_listing", "posts", ["status", "deleted_at"])
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("parent_comment_id", sa.UUID(), nullable=True),
        sa.Column(
            "ancestor_comment_id", sa.String(36), nullable=False, server_default="0"
        ),
        sa.Column("content", sa.String(1000), nullable=False),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("reply_count", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"]),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["parent_comment_id"], ["comments.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("reply_count >= 0", name="ck_comments_reply_count"),
    )
    op.create_index(
        "idx_comments_post_parent",
        "comments",
        ["post_id", "parent_comment_id", "deleted_at"],
    )
    op.create_index("idx_comments_parent", "comments", ["parent_comment_id"])
    op.create_index("idx_comments_ancestor", "comments", ["ancestor_comment_id"])

    # ========================================================================
    # POST_LIKES table
    # ========================================================================
    op.create_table(
        "post_likes",
        _id(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", "user_id", name="uq_post_likes_post_user"),
    )
    op.create_index("idx_post_likes_user_id", "post_likes", ["user_id"])

    # ========================================================================
    # PROMPTS table
    # ========================================================================
    op.create_table(
        "prompts",
        _id(),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", sa.String(50), nullable=False, server_default="BACKGROUND"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_prompts_author_updated",
        "prompts",
        ["author_id", sa.text("updated_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("prompts")
    op.drop_table("post_likes")
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("users")
