"""Feedback draft validation.

Pure functions only: no I/O, no logging, no mutation of the draft.
"""

import re

from videoindex.models.feedback import FeedbackDraft, FieldErrors

MAX_FEEDBACK_LENGTH = 500

# Minimal shape check (local@domain.tld), intentionally permissive
_EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

REQUIRED_MESSAGES: dict[str, str] = {
    "name": "Name is required",
    "email": "Email is required",
    "rating": "Rating is required",
    "category": "Category is required",
    "feedback_text": "Feedback is required",
}
EMAIL_INVALID_MESSAGE = "Email is invalid"
FEEDBACK_TOO_LONG_MESSAGE = (
    f"Feedback must be {MAX_FEEDBACK_LENGTH} characters or less"
)


def validate(draft: FeedbackDraft) -> FieldErrors:
    """Return a field -> message map for every failing rule.

    Rules are evaluated independently, so all failures are reported at once.
    An empty dict means the draft may be submitted.
    """
    errors: FieldErrors = {}

    if not draft.name.strip():
        errors["name"] = REQUIRED_MESSAGES["name"]

    if not draft.email.strip():
        errors["email"] = REQUIRED_MESSAGES["email"]
    elif not _EMAIL_PATTERN.search(draft.email):
        errors["email"] = EMAIL_INVALID_MESSAGE

    if draft.rating == 0:
        errors["rating"] = REQUIRED_MESSAGES["rating"]

    if not draft.category:
        errors["category"] = REQUIRED_MESSAGES["category"]

    if not draft.feedback_text.strip():
        errors["feedback_text"] = REQUIRED_MESSAGES["feedback_text"]
    elif len(draft.feedback_text) > MAX_FEEDBACK_LENGTH:
        errors["feedback_text"] = FEEDBACK_TOO_LONG_MESSAGE

    return errors


def is_valid(draft: FeedbackDraft) -> bool:
    return not validate(draft)
