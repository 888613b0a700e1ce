"""
Rating summary stage.

Builds the aggregate rating and per-star breakdown shown above the review
list, either from host-supplied aggregates or from the review collection.
"""

import logging
from collections import Counter
from typing import Iterable, List, Optional, Union

from storefront.models.rating import RatingDistributionEntry, RatingSummary, ratio_half_up
from storefront.models.review import Review
import config.settings as settings

logger = logging.getLogger(__name__)

SUPPLIED = "supplied"
DERIVED = "derived"
SUMMARY_POLICIES = (SUPPLIED, DERIVED)


def supplied_summary(
    average_rating: float,
    total_reviews: int,
    distribution: Iterable[Union[RatingDistributionEntry, dict]]
) -> RatingSummary:
    """
    Wrap precomputed aggregates from the host.

    Args:
        average_rating: Average star rating
        total_reviews: Number of reviews the average is based on
        distribution: Entries or {stars, count, percentage} dicts, any order

    Returns:
        RatingSummary with five entries, highest star first
    """
    entries = [
        entry if isinstance(entry, RatingDistributionEntry) else RatingDistributionEntry.from_dict(entry)
        for entry in distribution
    ]
    return RatingSummary(
        average_rating=average_rating,
        total_reviews=total_reviews,
        distribution=entries
    )


def derive_summary(reviews: Iterable[Review]) -> RatingSummary:
    """
    Compute the summary from the review collection itself.

    Percentages are rounded half-up to whole numbers, the average to one
    decimal place. An empty collection gives a zero average and empty bars.
    """
    ratings = [review.rating for review in reviews]
    total = len(ratings)
    counts = Counter(ratings)

    distribution = []
    for stars in range(settings.MAX_RATING, settings.MIN_RATING - 1, -1):
        count = counts.get(stars, 0)
        percentage = ratio_half_up(count * 100, total) if total else 0
        distribution.append(RatingDistributionEntry(stars=stars, count=count, percentage=percentage))

    average = ratio_half_up(sum(ratings) * 10, total) / 10 if total else 0.0

    return RatingSummary(average_rating=average, total_reviews=total, distribution=distribution)


class RatingSummarizer:
    """
    Chooses where the rating summary comes from.

    "supplied": use the host's aggregates when all of them are given, else
    derive from the reviews. "derived": always derive from the reviews.
    """

    def __init__(self, policy: str = settings.SUMMARY_POLICY):
        if policy not in SUMMARY_POLICIES:
            raise ValueError(f"Invalid summary policy: {policy}. Must be one of {SUMMARY_POLICIES}")
        self.policy = policy

    def summarize(
        self,
        reviews: Iterable[Review],
        average_rating: Optional[float] = None,
        total_reviews: Optional[int] = None,
        distribution: Optional[List[Union[RatingDistributionEntry, dict]]] = None
    ) -> RatingSummary:
        supplied = (
            average_rating is not None
            and total_reviews is not None
            and distribution is not None
        )

        if self.policy == SUPPLIED and supplied:
            return supplied_summary(average_rating, total_reviews, distribution)

        if self.policy == SUPPLIED:
            logger.debug("Host aggregates incomplete, deriving summary from reviews")

        return derive_summary(reviews)


# Design Rationale and Trade-offs:
#
# 1. Why fall back to derivation when host aggregates are incomplete?
#    - The panel always has something consistent to show
#    - Trade-off: A partially supplied summary is ignored entirely
#
# 2. Why Counter for the breakdown?
#    - Single pass over the ratings
#    - Trade-off: Could use plain dict, but Counter reads better
