"""
Rating summary data models.

Represents the per-star breakdown and the aggregate rating shown at the top
of the review panel.
"""

import math
from dataclasses import dataclass, field
from typing import List

import config.settings as settings


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up (4.5 -> 5)."""
    return int(math.floor(value + 0.5))


def ratio_half_up(numerator: int, denominator: int) -> int:
    """numerator / denominator rounded half-up, in exact integer arithmetic."""
    return (2 * numerator + denominator) // (2 * denominator)


@dataclass(frozen=True)
class RatingDistributionEntry:
    """
    One bar of the rating breakdown.
    """
    stars: int  # 1-5
    count: int
    percentage: float  # 0-100

    def __post_init__(self):
        if not (settings.MIN_RATING <= self.stars <= settings.MAX_RATING):
            raise ValueError(f"Invalid stars: {self.stars}. Must be {settings.MIN_RATING}-{settings.MAX_RATING}")

        if self.count < 0:
            raise ValueError(f"Invalid count: {self.count}. Must be non-negative")

        if not (0 <= self.percentage <= 100):
            raise ValueError(f"Invalid percentage: {self.percentage}. Must be 0-100")

    @property
    def bar_width(self) -> float:
        """Filled width of the bar, as a percentage of the full bar."""
        return min(max(self.percentage, 0), 100)

    @classmethod
    def from_dict(cls, data: dict) -> "RatingDistributionEntry":
        return cls(
            stars=int(data["stars"]),
            count=int(data.get("count", 0)),
            percentage=data.get("percentage", 0),
        )

    def to_dict(self) -> dict:
        return {
            "stars": self.stars,
            "count": self.count,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class RatingSummary:
    """
    Aggregate rating, review count and five-entry breakdown.

    The distribution always holds one entry per star value, highest first.
    """
    average_rating: float
    total_reviews: int
    distribution: List[RatingDistributionEntry] = field(default_factory=list)

    def __post_init__(self):
        if self.total_reviews < 0:
            raise ValueError(f"Invalid total_reviews: {self.total_reviews}. Must be non-negative")

        by_stars = {entry.stars: entry for entry in self.distribution}
        if len(by_stars) != len(self.distribution):
            raise ValueError("Rating distribution has duplicate star values")

        # Fill missing star values with empty bars, highest first
        normalized = [
            by_stars.get(stars, RatingDistributionEntry(stars=stars, count=0, percentage=0))
            for stars in range(settings.MAX_RATING, settings.MIN_RATING - 1, -1)
        ]
        object.__setattr__(self, "distribution", normalized)

    @property
    def star_icons(self) -> int:
        """Number of filled star icons for the average rating."""
        return round_half_up(self.average_rating)

    def to_dict(self) -> dict:
        return {
            "average_rating": self.average_rating,
            "total_reviews": self.total_reviews,
            "distribution": [entry.to_dict() for entry in self.distribution],
        }


# Design Rationale and Trade-offs:
#
# 1. Why fill missing star values in RatingSummary?
#    - The breakdown always renders five bars, highest first
#    - Trade-off: A supplied distribution can't omit a bar on purpose
#
# 2. Why two half-up helpers?
#    - round_half_up() rounds display floats (star icons)
#    - ratio_half_up() rounds count ratios exactly, with no float error at .5
#    - Trade-off: Python's round() would give 4.2 for 4.25
