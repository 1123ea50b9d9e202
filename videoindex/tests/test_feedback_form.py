"""Tests for the feedback form (draft + errors), without lifecycle gating."""

import pytest
from pydantic import ValidationError

from videoindex.models.feedback import FeedbackCategory, FeedbackDraft
from videoindex.services.feedback_form import FeedbackForm


def test_update_and_snapshot_are_independent():
    form = FeedbackForm()
    form.update("name", "Ana")
    snap = form.snapshot()
    form.update("name", "Bea")
    assert snap.name == "Ana"
    assert form.draft.name == "Bea"


def test_validate_replaces_errors_wholesale():
    form = FeedbackForm()
    assert form.validate() is False
    assert len(form.errors) == 5

    form.update("name", "Ana")
    form.update("email", "a@b.co")
    form.update("rating", 2)
    form.update("category", FeedbackCategory.UI)
    form.update("feedback_text", "Buttons overlap on mobile")
    assert form.validate() is True
    assert form.errors == {}


@pytest.mark.parametrize("rating", [-1, 6, True, "3", 2.0])
def test_rating_outside_range_or_not_int_rejected(rating):
    form = FeedbackForm()
    with pytest.raises(ValidationError):
        form.update("rating", rating)
    assert form.draft.rating == 0


def test_category_string_is_coerced():
    form = FeedbackForm()
    form.update("category", "performance")
    assert form.draft.category is FeedbackCategory.PERFORMANCE


def test_unknown_field_raises():
    form = FeedbackForm()
    with pytest.raises(ValueError, match="Unknown feedback field"):
        form.update("phone", "123")


def test_reset_clears_draft_and_errors():
    form = FeedbackForm()
    form.update("name", "Ana")
    form.validate()
    form.reset()
    assert form.draft == FeedbackDraft()
    assert form.errors == {}
    assert form.character_count == "0/500"
