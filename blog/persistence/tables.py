"""SQLAlchemy table definitions for the blog.

These Core tables are the single source of truth for queries and
match the schema created by the Alembic migrations.
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
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, unique=True),  # Stored lowercase
    Column("name", String(100), nullable=False),
    Column("password_hash", String(255), nullable=False),  # bcrypt
    Column("bio", Text, nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "role",
        Enum("user", "admin", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column("active", Boolean, nullable=False, server_default="true"),
    Column("login_attempts", Integer, nullable=False, server_default="0"),
    Column("locked_until", TIMESTAMP(timezone=True), nullable=True),
    Column("last_login_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_role_active", users_table.c.role, users_table.c.active)
Index("idx_users_created_at", users_table.c.created_at.desc())

# ============================================================================
# CATEGORIES TABLE
# ============================================================================
categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False),
    Column("slug", String(200), nullable=False, unique=True),
    Column("description", String(500), nullable=True),
    Column("color", String(20), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(50), nullable=False),
    Column("slug", String(200), nullable=False, unique=True),
    Column("description", String(200), nullable=True),
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
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("slug", String(200), nullable=False, unique=True),  # Global, incl. inactive
    Column("excerpt", String(500), nullable=True),
    Column("content", Text, nullable=False),
    Column("featured_image", Text, nullable=True),
    Column(
        "status",
        Enum("draft", "published", "archived", name="post_status", create_type=False),
        nullable=False,
        server_default="draft",
    ),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column("reading_time", Integer, nullable=False, server_default="1"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("allow_comments", Boolean, nullable=False, server_default="true"),
    Column("active", Boolean, nullable=False, server_default="true"),  # Soft delete
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "category_id",
        UUID,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("view_count >= 0", name="posts_view_count_non_negative"),
    CheckConstraint("comment_count >= 0", name="posts_comment_count_non_negative"),
)

Index("idx_posts_published_at", posts_table.c.published_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_category_id", posts_table.c.category_id)
Index("idx_posts_status_active", posts_table.c.status, posts_table.c.active)

# ============================================================================
# POST_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False),
    Column("position", Integer, nullable=False, server_default="0"),
    UniqueConstraint("post_id", "tag_id", name="uq_post_tag"),
)

Index("idx_post_tags_tag_id", post_tags_table.c.tag_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
)

Index("idx_comments_post_id", comments_table.c.post_id, comments_table.c.created_at)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    Column("answer_count", Integer, nullable=False, server_default="0"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvote_count >= 0", name="questions_upvotes_non_negative"),
    CheckConstraint("downvote_count >= 0", name="questions_downvotes_non_negative"),
    CheckConstraint("answer_count >= 0", name="questions_answers_non_negative"),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvote_count >= 0", name="answers_upvotes_non_negative"),
    CheckConstraint("downvote_count >= 0", name="answers_downvotes_non_negative"),
)

Index("idx_answers_question_id", answers_table.c.question_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "target_type",
        Enum("question", "answer", name="vote_target_type", create_type=False),
        nullable=False,
    ),
    Column("target_id", UUID, nullable=False),
    Column(
        "vote_type",
        Enum("upvote", "downvote", name="vote_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "target_type", "target_id", name="unique_vote"),
)

Index("idx_votes_target", votes_table.c.target_type, votes_table.c.target_id)
