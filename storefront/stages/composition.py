"""
Review composition state machine.

Transitions for the "Write a Review" form. The state is an immutable record
and every transition returns a new one:

    CLOSED --open_form--> OPEN
    OPEN --cancel--> CLOSED (draft discarded)
    OPEN --submit (title and content filled)--> CLOSED (draft handed off)

Edits, submit and cancel while CLOSED leave the state unchanged.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Union

from storefront.models.draft import DraftReview, ReviewSubmission
import config.settings as settings

logger = logging.getLogger(__name__)


class ComposerPhase(Enum):
    CLOSED = "closed"
    OPEN = "open"


class DraftField(Enum):
    """Free-text draft fields editable from the form."""
    TITLE = "title"
    CONTENT = "content"
    SIZE = "size"
    COLOR = "color"


@dataclass(frozen=True)
class ComposerState:
    phase: ComposerPhase = ComposerPhase.CLOSED
    draft: DraftReview = field(default_factory=DraftReview)

    @property
    def is_open(self) -> bool:
        return self.phase is ComposerPhase.OPEN


@dataclass(frozen=True)
class SubmitResult:
    """
    Outcome of a submit attempt.

    submission is None when nothing should be forwarded to the host; in that
    case missing_fields lists the required fields that blocked it (empty when
    the form was not open).
    """
    state: ComposerState
    submission: Optional[ReviewSubmission] = None
    missing_fields: List[str] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.submission is not None


CLOSED = ComposerState()


def open_form(state: ComposerState) -> ComposerState:
    if state.is_open:
        return state
    return ComposerState(phase=ComposerPhase.OPEN, draft=DraftReview())


def set_rating(state: ComposerState, stars: int) -> ComposerState:
    """Set the draft rating to the clicked star, snapped into 1-5."""
    if not state.is_open:
        logger.debug("Ignoring rating change while form is closed")
        return state

    snapped = min(max(int(stars), settings.MIN_RATING), settings.MAX_RATING)
    return replace(state, draft=replace(state.draft, rating=snapped))


def edit_field(state: ComposerState, name: Union[DraftField, str], value: str) -> ComposerState:
    """
    Update one text field of the draft.

    Raises:
        ValueError: If name is not an editable draft field
    """
    draft_field = DraftField(name)

    if not state.is_open:
        logger.debug(f"Ignoring edit of {draft_field.value} while form is closed")
        return state

    return replace(state, draft=replace(state.draft, **{draft_field.value: value}))


def cancel(state: ComposerState) -> ComposerState:
    if not state.is_open:
        return state
    return CLOSED


def submit(state: ComposerState) -> SubmitResult:
    if not state.is_open:
        logger.debug("Ignoring submit while form is closed")
        return SubmitResult(state=state)

    missing = state.draft.missing_fields()
    if missing:
        logger.warning(f"Review submission blocked, missing required fields: {', '.join(missing)}")
        return SubmitResult(state=state, missing_fields=missing)

    return SubmitResult(state=CLOSED, submission=state.draft.to_submission())
