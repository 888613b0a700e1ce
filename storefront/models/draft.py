"""
Review draft data models.

The in-progress review being composed in the panel form, and the payload
handed to the host when it is submitted.
"""

from dataclasses import dataclass

import config.settings as settings


@dataclass(frozen=True)
class ReviewSubmission:
    """
    A composed review forwarded to the host.

    Identifier, author, date and vote counts are assigned by the host.
    """
    rating: int
    title: str
    content: str
    size: str = ""
    color: str = ""
    verified: bool = False

    def to_dict(self) -> dict:
        return {
            "rating": self.rating,
            "title": self.title,
            "content": self.content,
            "size": self.size,
            "color": self.color,
            "verified": self.verified,
        }


@dataclass(frozen=True)
class DraftReview:
    """Form contents while a review is being written."""
    rating: int = settings.DEFAULT_DRAFT_RATING
    title: str = ""
    content: str = ""
    size: str = ""
    color: str = ""
    verified: bool = False  # Not editable from the form

    def missing_fields(self) -> list:
        """Required fields that are still empty."""
        return [name for name in ("title", "content") if not getattr(self, name)]

    def to_submission(self) -> ReviewSubmission:
        return ReviewSubmission(
            rating=self.rating,
            title=self.title,
            content=self.content,
            size=self.size,
            color=self.color,
            verified=self.verified,
        )


# Design Rationale and Trade-offs:
#
# 1. Why separate DraftReview and ReviewSubmission?
#    - The draft is form state; the submission is what the host receives
#    - Trade-off: Same fields declared twice
#
# 2. Why check only for empty title and content?
#    - Mirrors the form's required-field check
#    - Trade-off: Whitespace-only text passes
