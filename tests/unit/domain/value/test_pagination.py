"""Unit tests for pagination and slug value objects."""

import pytest
from pydantic import ValidationError

from blog.domain.value import PageRequest, Pagination, Slug


class TestPagination:
    @pytest.mark.parametrize(
        ("total", "limit", "expected_pages"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (15, 7, 3)],
    )
    def test_total_pages_is_ceiling(self, total, limit, expected_pages):
        pagination = Pagination.from_total(PageRequest(page=1, limit=limit), total)

        assert pagination.total_pages == expected_pages
        assert pagination.total_items == total
        assert pagination.items_per_page == limit

    def test_offset(self):
        assert PageRequest(page=3, limit=7).offset == 14

    def test_limit_is_capped(self):
        with pytest.raises(ValidationError):
            PageRequest(limit=101)


class TestSlug:
    def test_from_text_folds_accents_and_punctuation(self):
        assert Slug.from_text("Ça va? Black Scholes!") == Slug("ca-va-black-scholes")

    def test_from_text_falls_back(self):
        assert Slug.from_text("!!!", fallback="post") == Slug("post")

    @pytest.mark.parametrize("bad", ["Upper", "-lead", "trail-", "dou--ble", ""])
    def test_invalid_slugs_rejected(self, bad):
        with pytest.raises(ValidationError):
            Slug(bad)
