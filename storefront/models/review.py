"""
Review data model.

Represents one customer review as supplied by the host storefront.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

import config.settings as settings


@dataclass(frozen=True)
class Review:
    """
    A single customer review of a product.

    Immutable from the panel's point of view: sorting, filtering and voting
    all produce new sequences or copies.
    """
    review_id: str  # Assigned by the host
    user_id: str
    user_name: str
    rating: int  # 1-5 star rating
    title: str
    content: str
    date: str  # YYYY-MM-DD format
    verified: bool = False  # Verified purchase
    helpful: int = 0
    not_helpful: int = 0
    user_avatar: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None
    images: List[str] = field(default_factory=list)

    def __post_init__(self):
        if not (settings.MIN_RATING <= self.rating <= settings.MAX_RATING):
            raise ValueError(
                f"Invalid rating: {self.rating}. "
                f"Must be {settings.MIN_RATING}-{settings.MAX_RATING}"
            )

        if self.helpful < 0 or self.not_helpful < 0:
            raise ValueError(
                f"Vote counts must be non-negative, got "
                f"helpful={self.helpful}, not_helpful={self.not_helpful}"
            )

        try:
            datetime.strptime(self.date, settings.DATE_FORMAT)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid date: {self.date!r}. Expected {settings.DATE_FORMAT}")

    @property
    def submitted_on(self) -> date:
        """Submission date as a calendar date."""
        return datetime.strptime(self.date, settings.DATE_FORMAT).date()

    @classmethod
    def from_dict(cls, data: dict) -> "Review":
        """
        Create Review from a JSON dict.

        Accepts both the snake_case keys written by to_dict() and the
        camelCase keys used by the storefront front end.
        """
        return cls(
            review_id=str(data["review_id"] if "review_id" in data else data["id"]),
            user_id=data.get("user_id", data.get("userId", "")),
            user_name=data.get("user_name", data.get("userName", "")),
            rating=int(data["rating"]),
            title=data["title"],
            content=data.get("content", ""),
            date=data["date"],
            verified=bool(data.get("verified", False)),
            helpful=int(data.get("helpful", 0)),
            not_helpful=int(data.get("not_helpful", data.get("notHelpful", 0))),
            user_avatar=data.get("user_avatar", data.get("userAvatar")),
            size=data.get("size"),
            color=data.get("color"),
            images=list(data.get("images") or []),
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "review_id": self.review_id,
            "user_id": self.user_id,
            "user_name": self.user_name,
            "user_avatar": self.user_avatar,
            "rating": self.rating,
            "title": self.title,
            "content": self.content,
            "date": self.date,
            "verified": self.verified,
            "helpful": self.helpful,
            "not_helpful": self.not_helpful,
            "size": self.size,
            "color": self.color,
            "images": list(self.images),
        }


# Design Rationale and Trade-offs:
#
# 1. Why a frozen dataclass?
#    - The host owns the reviews; sorting and voting work on copies
#    - Trade-off: Updates go through dataclasses.replace()
#
# 2. Why keep the date as a YYYY-MM-DD string?
#    - Matches the storefront payload and JSON files directly
#    - Trade-off: submitted_on parses on every access
#
# 3. Why accept camelCase keys in from_dict()?
#    - Review files exported from the front end load unchanged
#    - Trade-off: Two key spellings to keep in sync
