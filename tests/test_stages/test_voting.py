"""
Unit tests for vote recording.
"""

from conftest import make_review
from storefront.stages.voting import VoteType, record_vote


def test_helpful_vote():
    """Test that a helpful vote returns an updated copy."""
    review = make_review(1, helpful=2)

    updated = record_vote(review, VoteType.HELPFUL)

    assert updated.helpful == 3
    assert updated.not_helpful == 0
    assert review.helpful == 2


def test_not_helpful_vote_from_string():
    """Test a not-helpful vote given by its string value."""
    review = make_review(1, not_helpful=4)

    updated = record_vote(review, "not_helpful")

    assert updated.not_helpful == 5
    assert updated.helpful == review.helpful
    assert updated.review_id == review.review_id
