"""initial_schema

Create the schema for the blog and its Q&A section:
- Users (email/password accounts with roles and login lockout)
- Categories and tags
- Posts (soft-deleted, with a post_tags junction)
- Comments (threaded through parent_id and depth)
- Questions and answers (denormalized vote and answer counters)
- Votes (one per user and target, up or down)

Revision ID: 3f1c2a7d9b04
Revises:
Create Date: 2026-10-17 09:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a7d9b04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUMS = {
    "user_role": ("user", "admin"),
    "post_status": ("draft", "published", "archived"),
    "vote_target_type": ("question", "answer"),
    "vote_type": ("upvote", "downvote"),
}


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamps() -> list[sa.Column]:
    return [
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


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    for name, values in ENUMS.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _uuid_pk(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "role",
            postgresql.ENUM(*ENUMS["user_role"], name="user_role", create_type=False),
            nullable=False,
            server_default="user",
        ),
        sa.Column("active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("login_attempts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("locked_until", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("last_login_at", sa.TIMESTAMP(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("idx_users_role_active", "users", ["role", "active"])
    op.create_index(
        "idx_users_created_at", "users", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # CATEGORIES and TAGS tables
    # ========================================================================
    op.create_table(
        "categories",
        _uuid_pk(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("color", sa.String(20), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_categories_slug"),
    )

    op.create_table(
        "tags",
        _uuid_pk(),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("description", sa.String(200), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_tags_slug"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        _uuid_pk(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("excerpt", sa.String(500), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("featured_image", sa.Text(), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(
                *ENUMS["post_status"], name="post_status", create_type=False
            ),
            nullable=False,
            server_default="draft",
        ),
        sa.Column("published_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("reading_time", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "allow_comments", sa.Boolean(), nullable=False, server_default="true"
        ),
        sa.Column("active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("category_id", sa.UUID(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["category_id"], ["categories.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_posts_slug"),
        sa.CheckConstraint("view_count >= 0", name="posts_view_count_non_negative"),
        sa.CheckConstraint(
            "comment_count >= 0", name="posts_comment_count_non_negative"
        ),
    )
    op.create_index(
        "idx_posts_published_at", "posts", [sa.text("published_at DESC")]
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])
    op.create_index("idx_posts_category_id", "posts", ["category_id"])
    op.create_index("idx_posts_status_active", "posts", ["status", "active"])

    op.create_table(
        "post_tags",
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("post_id", "tag_id", name="uq_post_tag"),
    )
    op.create_index("idx_post_tags_tag_id", "post_tags", ["tag_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _uuid_pk(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("depth >= 0", name="depth_non_negative"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id", "created_at"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])

    # ========================================================================
    # QUESTIONS and ANSWERS tables
    # ========================================================================
    op.create_table(
        "questions",
        _uuid_pk(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("upvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("answer_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvote_count >= 0", name="questions_upvotes_non_negative"),
        sa.CheckConstraint(
            "downvote_count >= 0", name="questions_downvotes_non_negative"
        ),
        sa.CheckConstraint("answer_count >= 0", name="questions_answers_non_negative"),
    )
    op.create_index(
        "idx_questions_created_at", "questions", [sa.text("created_at DESC")]
    )
    op.create_index("idx_questions_author_id", "questions", ["author_id"])
    op.create_index(
        "idx_questions_tags", "questions", ["tags"], postgresql_using="gin"
    )

    op.create_table(
        "answers",
        _uuid_pk(),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("upvote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvote_count", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["question_id"], ["questions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvote_count >= 0", name="answers_upvotes_non_negative"),
        sa.CheckConstraint(
            "downvote_count >= 0", name="answers_downvotes_non_negative"
        ),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])

    # ========================================================================
    # VOTES table (polymorphic target: question or answer)
    # ========================================================================
    op.create_table(
        "votes",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "target_type",
            postgresql.ENUM(
                *ENUMS["vote_target_type"], name="vote_target_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column(
            "vote_type",
            postgresql.ENUM(*ENUMS["vote_type"], name="vote_type", create_type=False),
            nullable=False,
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "target_type", "target_id", name="unique_vote"
        ),
    )
    op.create_index("idx_votes_target", "votes", ["target_type", "target_id"])


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        "votes",
        "answers",
        "questions",
        "comments",
        "post_tags",
        "posts",
        "tags",
        "categories",
        "users",
    ):
        op.drop_table(table)

    for name in reversed(list(ENUMS)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
