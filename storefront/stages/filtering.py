"""
Filter stage.

Selects the subset of an already-sorted review list to display.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Iterable, List, Union

from storefront.models.review import Review

logger = logging.getLogger(__name__)


class FilterKey(Enum):
    ALL = "all"
    VERIFIED = "verified"
    FIVE_STAR = "5-star"
    FOUR_STAR = "4-star"
    THREE_STAR = "3-star"
    TWO_STAR = "2-star"
    ONE_STAR = "1-star"

    @classmethod
    def parse(cls, value: Union["FilterKey", str]) -> "FilterKey":
        """Return the matching FilterKey; unrecognized values map to ALL."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.debug(f"Unrecognized filter key {value!r}, showing all reviews")
            return cls.ALL


def _rating_equals(stars: int) -> Callable[[Review], bool]:
    return lambda review: review.rating == stars


_FILTER_TABLE: Dict[FilterKey, Callable[[Review], bool]] = {
    FilterKey.ALL: lambda review: True,
    FilterKey.VERIFIED: lambda review: review.verified,
    FilterKey.FIVE_STAR: _rating_equals(5),
    FilterKey.FOUR_STAR: _rating_equals(4),
    FilterKey.THREE_STAR: _rating_equals(3),
    FilterKey.TWO_STAR: _rating_equals(2),
    FilterKey.ONE_STAR: _rating_equals(1),
}


def filter_reviews(reviews: Iterable[Review], key: Union[FilterKey, str]) -> List[Review]:
    """
    Keep the reviews matching the filter mode, preserving order.

    Args:
        reviews: Review sequence, usually the output of sort_reviews()
        key: FilterKey or its string value

    Returns:
        New list with the matching reviews
    """
    predicate = _FILTER_TABLE[FilterKey.parse(key)]
    return [review for review in reviews if predicate(review)]
