"""
Sort stage.

Orders a review collection by one of the panel's sort modes.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from storefront.models.review import Review

logger = logging.getLogger(__name__)


class SortKey(Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    HIGHEST = "highest"
    LOWEST = "lowest"
    HELPFUL = "helpful"

    @classmethod
    def parse(cls, value: Union["SortKey", str]) -> Optional["SortKey"]:
        """Return the matching SortKey, or None for an unrecognized value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


# SortKey -> (key function, descending)
_SORT_TABLE: Dict[SortKey, Tuple[Callable[[Review], object], bool]] = {
    SortKey.NEWEST: (lambda review: review.submitted_on, True),
    SortKey.OLDEST: (lambda review: review.submitted_on, False),
    SortKey.HIGHEST: (lambda review: review.rating, True),
    SortKey.LOWEST: (lambda review: review.rating, False),
    SortKey.HELPFUL: (lambda review: review.helpful, True),
}


def sort_reviews(reviews: Iterable[Review], key: Union[SortKey, str]) -> List[Review]:
    """
    Sort reviews by the given mode.

    Args:
        reviews: Review collection (not modified)
        key: SortKey or its string value

    Returns:
        New list of reviews. Reviews with equal sort values keep their input
        order. An unrecognized key returns the input order unchanged.
    """
    sort_key = SortKey.parse(key)
    if sort_key is None:
        logger.debug(f"Unrecognized sort key {key!r}, keeping input order")
        return list(reviews)

    key_func, descending = _SORT_TABLE[sort_key]
    return sorted(reviews, key=key_func, reverse=descending)
