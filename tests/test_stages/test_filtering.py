"""
Unit tests for the filter stage.
"""

import pytest

from conftest import ids, make_review
from storefront.stages.filtering import FilterKey, filter_reviews
from storefront.stages.sorting import sort_reviews


@pytest.fixture
def mixed_reviews():
    """Reviews with a mix of ratings and verified flags."""
    return [
        make_review(1, rating=5, verified=True),
        make_review(2, rating=3, verified=False),
        make_review(3, rating=3, verified=True),
        make_review(4, rating=1, verified=False),
        make_review(5, rating=5, verified=False),
    ]


def test_all_is_identity(mixed_reviews):
    """Test that the all filter keeps every review in order."""
    assert filter_reviews(mixed_reviews, "all") == mixed_reviews


def test_verified_only(mixed_reviews):
    """Test that verified keeps exactly the verified reviews."""
    result = filter_reviews(mixed_reviews, FilterKey.VERIFIED)

    assert ids(result) == ["1", "3"]
    assert all(review.verified for review in result)


@pytest.mark.parametrize("stars", [1, 2, 3, 4, 5])
def test_star_filters(mixed_reviews, stars):
    """Test that each N-star filter keeps only ratings equal to N."""
    result = filter_reviews(mixed_reviews, f"{stars}-star")

    assert all(review.rating == stars for review in result)
    assert len(result) == sum(1 for review in mixed_reviews if review.rating == stars)


def test_three_star_keeps_order(mixed_reviews):
    """Test that filtering preserves the incoming order."""
    assert ids(filter_reviews(mixed_reviews, "3-star")) == ["2", "3"]


def test_unknown_key_treated_as_all(mixed_reviews):
    """Test that an unrecognized filter key shows every review."""
    assert filter_reviews(mixed_reviews, "6-star") == mixed_reviews


def test_newest_then_five_star(scenario_reviews):
    """Test the newest sort followed by the 5-star filter."""
    sorted_reviews = sort_reviews(scenario_reviews, "newest")
    assert ids(filter_reviews(sorted_reviews, "5-star")) == ["2"]


def test_helpful_then_verified_keeps_sort_order(scenario_reviews):
    """Test that the verified filter keeps the helpful sort order."""
    sorted_reviews = sort_reviews(scenario_reviews, "helpful")
    assert ids(sorted_reviews) == ["2", "3", "1"]
    assert ids(filter_reviews(sorted_reviews, "verified")) == ["2", "1"]


def test_parse_unknown_falls_back_to_all():
    """Test FilterKey parsing and its fallback."""
    assert FilterKey.parse("nonsense") is FilterKey.ALL
    assert FilterKey.parse("2-star") is FilterKey.TWO_STAR
