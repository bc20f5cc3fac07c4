"""End-to-end tests for posts, comments, categories and tags."""

from tests.e2e.helpers import admin_headers, register
from tests.harness import create_client_fixture

client = create_client_fixture()


def _create_post(client, headers, **overrides):
    body = {"title": "Pairs Trading Basics", "content": "word " * 300}
    body.update(overrides)
    response = client.post("/posts", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestPosts:
    def test_published_post_is_public_and_counts_views(self, client):
        # Arrange
        _, headers = register(client, "writer@example.com")
        post = _create_post(client, headers, status="published")

        # Act
        first = client.get(f"/posts/{post['slug']}")
        second = client.get(f"/posts/{post['slug']}")

        # Assert
        assert post["slug"] == "pairs-trading-basics"
        assert post["reading_time"] == 2
        assert first.json()["data"]["view_count"] == 1
        assert second.json()["data"]["view_count"] == 2

    def test_draft_visible_only_to_author(self, client):
        # Arrange
        _, author = register(client, "writer@example.com")
        _, other = register(client, "reader@example.com")
        post = _create_post(client, author)

        # Act
        anonymous = client.get(f"/posts/{post['slug']}")
        stranger = client.get(f"/posts/{post['slug']}", headers=other)
        own = client.get(f"/posts/{post['slug']}", headers=author)
        mine = client.get("/posts/mine", headers=author)
        public = client.get("/posts")

        # Assert
        assert anonymous.status_code == 404
        assert stranger.status_code == 404
        assert own.status_code == 200
        assert [p["post_id"] for p in mine.json()["data"]] == [post["post_id"]]
        assert public.json()["data"] == []
        assert public.json()["pagination"]["total_items"] == 0

    def test_duplicate_titles_get_distinct_slugs(self, client):
        _, headers = register(client, "writer@example.com")

        first = _create_post(client, headers)
        second = _create_post(client, headers)

        assert second["slug"] == f"{first['slug']}-2"

    def test_malformed_slug_is_422(self, client):
        response = client.get("/posts/Not_A_Slug")

        assert response.status_code == 422

    def test_only_owner_can_update(self, client):
        # Arrange
        _, author = register(client, "writer@example.com")
        _, other = register(client, "reader@example.com")
        post = _create_post(client, author)

        # Act
        forbidden = client.put(
            f"/posts/{post['post_id']}", json={"title": "Mine now"}, headers=other
        )
        allowed = client.put(
            f"/posts/{post['post_id']}",
            json={"title": "Renamed", "status": "published"},
            headers=author,
        )

        # Assert
        assert forbidden.status_code == 403
        assert allowed.status_code == 200
        assert allowed.json()["data"]["slug"] == post["slug"]
        assert allowed.json()["data"]["published_at"] is not None


class TestCategoriesAndFilters:
    def test_category_creation_requires_admin(self, client):
        _, headers = register(client, "writer@example.com")

        response = client.post("/categories", json={"name": "Crypto"}, headers=headers)

        assert response.status_code == 403
        assert response.json()["message"] == "Admin access required"

    def test_filter_published_posts_by_category(self, client):
        # Arrange
        category = client.post(
            "/categories",
            json={"name": "Statistical Arbitrage"},
            headers=admin_headers(),
        ).json()["data"]
        _, headers = register(client, "writer@example.com")
        in_category = _create_post(
            client,
            headers,
            title="Cointegration",
            category_id=category["category_id"],
            status="published",
        )
        _create_post(client, headers, title="Unrelated", status="published")

        # Act
        response = client.get("/posts", params={"category": category["slug"]})

        # Assert
        assert category["slug"] == "statistical-arbitrage"
        assert [p["post_id"] for p in response.json()["data"]] == [
            in_category["post_id"]
        ]
        assert client.get("/categories").json()["data"][0]["name"] == (
            "Statistical Arbitrage"
        )

    def test_unknown_tag_on_post_is_400(self, client):
        _, headers = register(client, "writer@example.com")

        response = client.post(
            "/posts",
            json={"title": "Tagged", "content": "body", "tags": ["nonexistent"]},
            headers=headers,
        )

        assert response.status_code == 400
        assert "nonexistent" in response.json()["message"]


class TestComments:
    def test_comment_thread(self, client):
        # Arrange
        _, author = register(client, "writer@example.com")
        _, reader = register(client, "reader@example.com")
        post = _create_post(client, author, status="published")
        url = f"/posts/{post['post_id']}/comments"

        # Act
        parent = client.post(url, json={"content": "Nice"}, headers=reader)
        reply = client.post(
            url,
            json={"content": "Thanks", "parent_id": parent.json()["data"]["comment_id"]},
            headers=author,
        )
        listed = client.get(url)
        forbidden = client.delete(
            f"/comments/{parent.json()['data']['comment_id']}", headers=author
        )

        # Assert
        assert parent.status_code == 201
        assert reply.json()["data"]["depth"] == 1
        assert [c["content"] for c in listed.json()["data"]] == ["Nice", "Thanks"]
        assert forbidden.status_code == 403
