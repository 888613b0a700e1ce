"""
Shared fixtures for storefront tests.
"""

import pytest

from storefront.models.review import Review


def make_review(review_id, date="2024-01-01", rating=5, helpful=0, verified=True, **kwargs):
    """Build a Review with defaults for fields a test doesn't care about."""
    return Review(
        review_id=str(review_id),
        user_id=kwargs.pop("user_id", f"user{review_id}"),
        user_name=kwargs.pop("user_name", f"User {review_id}"),
        rating=rating,
        title=kwargs.pop("title", f"Review {review_id}"),
        content=kwargs.pop("content", "Some text"),
        date=date,
        verified=verified,
        helpful=helpful,
        **kwargs
    )


@pytest.fixture
def scenario_reviews():
    """Three reviews with distinct dates, ratings and helpful votes; #3 unverified."""
    return [
        make_review(1, date="2024-01-05", rating=3, helpful=3, verified=True),
        make_review(2, date="2024-01-15", rating=5, helpful=12, verified=True),
        make_review(3, date="2024-01-10", rating=4, helpful=8, verified=False),
    ]


def ids(reviews):
    return [review.review_id for review in reviews]
