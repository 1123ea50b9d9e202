"""Feedback draft state: the editable fields and their current errors."""

from typing import Any

from videoindex.models.feedback import FeedbackDraft, FieldErrors
from videoindex.services.validation import MAX_FEEDBACK_LENGTH, validate

EDITABLE_FIELDS = ("name", "email", "rating", "category", "feedback_text")


class FeedbackForm:
    """Holds the draft and the errors from the last validation pass.

    The form does not decide *when* edits are allowed; the modal gates every
    call according to its lifecycle state.
    """

    def __init__(self) -> None:
        self.draft = FeedbackDraft()
        self.errors: FieldErrors = {}

    def update(self, field: str, value: Any) -> None:
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown feedback field: {field!r}")
        # validate_assignment on the model rejects out-of-range ratings
        # and unknown categories
        setattr(self.draft, field, value)

    def validate(self) -> bool:
        """Recompute errors from scratch. Returns True if the draft is valid."""
        self.errors = validate(self.draft)
        return not self.errors

    def snapshot(self) -> FeedbackDraft:
        return self.draft.model_copy(deep=True)

    def reset(self) -> None:
        self.draft = FeedbackDraft()
        self.errors = {}

    @property
    def character_count(self) -> str:
        return f"{len(self.draft.feedback_text)}/{MAX_FEEDBACK_LENGTH}"
