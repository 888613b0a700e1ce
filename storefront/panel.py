"""
Review Panel.

Owns the panel's UI state and derives the rating summary and the visible
review list from the host's inputs on every view.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Union

from storefront.models.draft import DraftReview, ReviewSubmission
from storefront.models.rating import RatingDistributionEntry, RatingSummary
from storefront.models.review import Review
from storefront.stages import composition
from storefront.stages.composition import DraftField
from storefront.stages.filtering import FilterKey, filter_reviews
from storefront.stages.sorting import SortKey, sort_reviews
from storefront.stages.summary import RatingSummarizer
from storefront.stages.voting import VoteType
import config.settings as settings

logger = logging.getLogger(__name__)

SubmitCallback = Callable[[ReviewSubmission], None]
VoteCallback = Callable[[str, VoteType], None]


@dataclass(frozen=True)
class PanelView:
    """Everything the panel displays for one render."""
    summary: RatingSummary
    sort_key: str
    filter_key: str
    reviews: List[Review]
    form_visible: bool
    draft: DraftReview


class ReviewPanel:
    """
    Product review panel.

    Each view runs:
    1. Rating summary → 2. Sort → 3. Filter

    The host owns the reviews and aggregates; the panel owns the sort key,
    filter key and the review form.
    """

    def __init__(
        self,
        reviews: Iterable[Review],
        average_rating: Optional[float] = None,
        total_reviews: Optional[int] = None,
        distribution: Optional[List[Union[RatingDistributionEntry, dict]]] = None,
        on_submit_review: Optional[SubmitCallback] = None,
        on_vote: Optional[VoteCallback] = None,
        summary_policy: str = settings.SUMMARY_POLICY
    ):
        """
        Initialize the panel.

        Args:
            reviews: Review collection supplied by the host (read-only)
            average_rating: Precomputed average rating
            total_reviews: Precomputed review count
            distribution: Precomputed per-star breakdown
            on_submit_review: Called with each accepted ReviewSubmission
            on_vote: Called with (review_id, VoteType) for vote clicks
            summary_policy: "supplied" or "derived"
        """
        self.summarizer = RatingSummarizer(summary_policy)
        self.on_submit_review = on_submit_review
        self.on_vote = on_vote

        self.sort_key = settings.DEFAULT_SORT_KEY
        self.filter_key = settings.DEFAULT_FILTER_KEY
        self.composer = composition.CLOSED

        self.update_reviews(reviews, average_rating, total_reviews, distribution)

        logger.info(
            f"Initialized ReviewPanel with {len(self.reviews)} reviews "
            f"(summary policy: {summary_policy})"
        )

    def update_reviews(
        self,
        reviews: Iterable[Review],
        average_rating: Optional[float] = None,
        total_reviews: Optional[int] = None,
        distribution: Optional[List[Union[RatingDistributionEntry, dict]]] = None
    ) -> None:
        """Replace the host-owned inputs. Panel state is kept."""
        self.reviews = tuple(reviews)
        self.average_rating = average_rating
        self.total_reviews = total_reviews
        self.distribution = list(distribution) if distribution is not None else None

    # ------------------------------------------------------------------
    # Derived view
    # ------------------------------------------------------------------
    def summary(self) -> RatingSummary:
        return self.summarizer.summarize(
            self.reviews,
            average_rating=self.average_rating,
            total_reviews=self.total_reviews,
            distribution=self.distribution
        )

    def visible_reviews(self) -> List[Review]:
        """Reviews after the sort stage and then the filter stage."""
        return filter_reviews(sort_reviews(self.reviews, self.sort_key), self.filter_key)

    def view(self) -> PanelView:
        return PanelView(
            summary=self.summary(),
            sort_key=self.sort_key,
            filter_key=self.filter_key,
            reviews=self.visible_reviews(),
            form_visible=self.form_visible,
            draft=self.draft
        )

    # ------------------------------------------------------------------
    # Sort and filter selection
    # ------------------------------------------------------------------
    def select_sort(self, key: Union[SortKey, str]) -> None:
        self.sort_key = key.value if isinstance(key, SortKey) else key
        logger.debug(f"Sort key set to {self.sort_key!r}")

    def select_filter(self, key: Union[FilterKey, str]) -> None:
        self.filter_key = key.value if isinstance(key, FilterKey) else key
        logger.debug(f"Filter key set to {self.filter_key!r}")

    # ------------------------------------------------------------------
    # Review form
    # ------------------------------------------------------------------
    @property
    def form_visible(self) -> bool:
        return self.composer.is_open

    @property
    def draft(self) -> DraftReview:
        return self.composer.draft

    def open_form(self) -> None:
        self.composer = composition.open_form(self.composer)

    def set_rating(self, stars: int) -> None:
        self.composer = composition.set_rating(self.composer, stars)

    def edit_field(self, name: Union[DraftField, str], value: str) -> None:
        self.composer = composition.edit_field(self.composer, name, value)

    def cancel(self) -> None:
        self.composer = composition.cancel(self.composer)

    def submit(self) -> Optional[ReviewSubmission]:
        """
        Submit the draft.

        Returns:
            The forwarded ReviewSubmission, or None if the form was closed or
            a required field is empty (the form then stays open)

        Raises:
            Whatever on_submit_review raises; the form and draft are kept
        """
        result = composition.submit(self.composer)

        if not result.accepted:
            self.composer = result.state
            return None

        if self.on_submit_review is None:
            logger.info("No submission handler supplied, discarding review draft")
            self.composer = result.state
            return result.submission

        try:
            self.on_submit_review(result.submission)
        except Exception as e:
            logger.error(f"Submission handler failed, keeping review draft: {e}")
            raise

        self.composer = result.state
        logger.info(f"Forwarded {result.submission.rating}-star review to host")
        return result.submission

    # ------------------------------------------------------------------
    # Votes
    # ------------------------------------------------------------------
    def vote(self, review_id: str, vote: Union[VoteType, str]) -> None:
        """Forward a helpful / not-helpful click to the host."""
        vote = VoteType(vote)

        if not any(review.review_id == review_id for review in self.reviews):
            logger.warning(f"Vote for unknown review {review_id}, ignoring")
            return

        if self.on_vote is None:
            logger.debug(f"No vote handler supplied, ignoring {vote.value} vote on {review_id}")
            return

        self.on_vote(review_id, vote)


# Design Rationale and Trade-offs:
#
# 1. Why derive the view on every call instead of caching it?
#    - Host inputs and UI state can change between renders
#    - Trade-off: Re-sorts the collection each time, fine at panel sizes
#
# 2. Why update the form state only after the submit handler returns?
#    - A failing host handler leaves the user's draft intact for a retry
#    - Trade-off: The handler's exception propagates to the caller
