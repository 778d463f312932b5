"""SQLAlchemy table definitions for PromptHub.

Rows are mapped to domain models by hand in ``mappers``. The schema matches
the Alembic migrations.

Soft delete: ``deleted_at`` holds ACTIVE_SENTINEL while a row is live, so
compound unique keys such as (email, deleted_at) only bind live rows.
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
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

SENTINEL_DEFAULT = "'9999-12-31 23:59:59.999+00'"

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("email", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("name", String(100), nullable=True),
    Column("phone", String(20), nullable=True),
    Column("avatar", Text, nullable=True),
    Column("role", String(20), nullable=False, server_default="USER"),
    Column("status", String(20), nullable=False, server_default="ACTIVE"),
    Column(
        "deleted_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=SENTINEL_DEFAULT,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", "deleted_at", name="uq_users_email_deleted_at"),
    UniqueConstraint("phone", "deleted_at", name="uq_users_phone_deleted_at"),
    CheckConstraint("role IN ('USER', 'ADMIN')", name="ck_users_role"),
    CheckConstraint("status IN ('ACTIVE', 'DISABLED')", name="ck_users_status"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("title", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("content", Text, nullable=False),
    Column("tags", Text, nullable=False, server_default=""),  # Comma-delimited
    Column("status", String(20), nullable=False, server_default="active"),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("fork_count", Integer, nullable=False, server_default="0"),
    Column(
        "deleted_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=SENTINEL_DEFAULT,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("status IN ('active', 'hidden')", name="ck_posts_status"),
    CheckConstraint("like_count >= 0", name="ck_posts_like_count"),
    CheckConstraint("comment_count >= 0", name="ck_posts_comment_count"),
)

Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_listing", posts_table.c.status, posts_table.c.deleted_at)
Index("idx_posts_created_at", posts_table.c.created_at.desc())

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("post_id", UUID, ForeignKey("posts.id"), nullable=False),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("parent_comment_id", UUID, ForeignKey("comments.id"), nullable=True),
    # Top-level comment of the thread, "0" for top-level comments
    Column("ancestor_comment_id", String(36), nullable=False, server_default="0"),
    Column("content", String(1000), nullable=False),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column(
        "deleted_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=SENTINEL_DEFAULT,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("reply_count >= 0", name="ck_comments_reply_count"),
)

Index(
    "idx_comments_post_parent",
    comments_table.c.post_id,
    comments_table.c.parent_comment_id,
    comments_table.c.deleted_at,
)
Index("idx_comments_parent", comments_table.c.parent_comment_id)
Index("idx_comments_ancestor", comments_table.c.ancestor_comment_id)

# ============================================================================
# POST LIKES TABLE
# ============================================================================
post_likes_table = Table(
    "post_likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_post_likes_post_user"),
)

Index("idx_post_likes_user_id", post_likes_table.c.user_id)

# ============================================================================
# PROMPTS TABLE
# ============================================================================
prompts_table = Table(
    "prompts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("title", String(100), nullable=False),
    Column("content", Text, nullable=False),
    Column("description", Text, nullable=True),
    Column("type", String(50), nullable=False, server_default="BACKGROUND"),
    Column(
        "deleted_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=SENTINEL_DEFAULT,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_prompts_author_updated",
    prompts_table.c.author_id,
    prompts_table.c.updated_at.desc(),
)
