"""Feedback form data models."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

RATING_MAX = 5

# Field name -> human-readable message. Missing key means the field is valid.
FieldErrors = dict[str, str]


class FeedbackCategory(str, Enum):
    """Closed set of feedback categories offered by the modal."""

    BUG = "bug"
    FEATURE = "feature"
    UI = "ui"
    PERFORMANCE = "performance"
    CONTENT = "content"
    GENERAL = "general"


class CategoryInfo(BaseModel):
    """Display metadata for one feedback category."""

    value: FeedbackCategory
    label: str
    description: str


FEEDBACK_CATEGORIES: list[CategoryInfo] = [
    CategoryInfo(
        value=FeedbackCategory.BUG,
        label="Bug Report",
        description="Report a technical issue or error",
    ),
    CategoryInfo(
        value=FeedbackCategory.FEATURE,
        label="Feature Request",
        description="Suggest a new feature or improvement",
    ),
    CategoryInfo(
        value=FeedbackCategory.UI,
        label="UI/UX Feedback",
        description="Comments on design and user experience",
    ),
    CategoryInfo(
        value=FeedbackCategory.PERFORMANCE,
        label="Performance",
        description="Issues with speed or responsiveness",
    ),
    CategoryInfo(
        value=FeedbackCategory.CONTENT,
        label="Content Quality",
        description="Feedback on video content or accuracy",
    ),
    CategoryInfo(
        value=FeedbackCategory.GENERAL,
        label="General Feedback",
        description="Other comments or suggestions",
    ),
]


class FeedbackDraft(BaseModel):
    """In-progress feedback record held by the modal.

    Assignments are validated, so ``rating`` can never leave [0, 5] and
    ``category`` can only hold a known category or ``""`` (unset).
    ``feedback_text`` is unbounded here: over-length text is
    reported by validation, never truncated.
    """

    name: str = ""
    email: str = ""
    rating: int = Field(0, ge=0, le=RATING_MAX, strict=True)  # 0 = unset
    category: FeedbackCategory | Literal[""] = ""
    feedback_text: str = ""

    model_config = {"validate_assignment": True}


class ModalState(str, Enum):
    """Lifecycle of the feedback modal. Exactly one value at a time."""

    CLOSED = "closed"
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


class FeedbackValidationResult(BaseModel):
    """Response body for draft validation."""

    valid: bool
    errors: FieldErrors = {}
