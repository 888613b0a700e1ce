"""
Helpful / not-helpful votes.

The panel does not own the review collection, so a vote produces an updated
copy of the review for the host to store.
"""

from dataclasses import replace
from enum import Enum

from storefront.models.review import Review


class VoteType(Enum):
    HELPFUL = "helpful"
    NOT_HELPFUL = "not_helpful"


def record_vote(review: Review, vote: VoteType) -> Review:
    """Return a copy of review with the counter for vote incremented."""
    vote = VoteType(vote)
    if vote is VoteType.HELPFUL:
        return replace(review, helpful=review.helpful + 1)
    return replace(review, not_helpful=review.not_helpful + 1)
