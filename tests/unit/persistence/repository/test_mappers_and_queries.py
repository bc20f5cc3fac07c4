"""Unit tests for row mappers and query helpers."""

from datetime import datetime, timezone
from uuid import uuid4

from blog.domain.model import Post
from blog.domain.value import PostId, PostStatus, Slug, UserId
from blog.persistence.mappers import post_to_dict, row_to_question
from blog.persistence.repository.query import contains_pattern


class TestContainsPattern:
    def test_wraps_in_wildcards(self):
        assert contains_pattern("alpha") == "%alpha%"

    def test_escapes_like_metacharacters(self):
        assert contains_pattern("50%_off\\") == "%50\\%\\_off\\\\%"


class TestMappers:
    def test_row_to_question_accepts_string_ids(self):
        # Arrange
        question_id, author_id = uuid4(), uuid4()
        now = datetime.now(timezone.utc)
        row = {
            "id": str(question_id),
            "title": "Mapped from a database row",
            "content": "Content of the mapped row.",
            "author_id": str(author_id),
            "tags": None,
            "upvote_count": 3,
            "downvote_count": 1,
            "answer_count": 2,
            "view_count": 10,
            "created_at": now,
            "updated_at": now,
        }

        # Act
        question = row_to_question(row)

        # Assert
        assert question.id == question_id
        assert question.author_id == author_id
        assert question.tags == []
        assert question.net_votes == 2

    def test_post_to_dict_leaves_tags_to_junction_table(self):
        post = Post(
            id=PostId(uuid4()),
            title="Tagged post",
            slug=Slug("tagged-post"),
            content="body",
            status=PostStatus.PUBLISHED,
            author_id=UserId(uuid4()),
            tag_slugs=[Slug("python")],
        )

        data = post_to_dict(post)

        assert "tag_slugs" not in data
        assert data["status"] == "published"
        assert data["slug"] == "tagged-post"
