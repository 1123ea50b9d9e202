"""Feedback form endpoints: category list and draft validation."""

import logging

from fastapi import APIRouter

from videoindex.models.feedback import (
    FEEDBACK_CATEGORIES,
    CategoryInfo,
    FeedbackDraft,
    FeedbackValidationResult,
)
from videoindex.services.validation import validate

router = APIRouter(prefix="/feedback", tags=["feedback"])
logger = logging.getLogger(__name__)


@router.get("/categories", response_model=list[CategoryInfo])
async def list_categories():
    """List the fixed feedback categories in display order."""
    return FEEDBACK_CATEGORIES


@router.post("/validate", response_model=FeedbackValidationResult)
async def validate_feedback(draft: FeedbackDraft):
    """Validate a feedback draft. Nothing is stored or forwarded."""
    errors = validate(draft)
    if errors:
        logger.info("Draft failed validation: %s", ", ".join(sorted(errors)))
    return FeedbackValidationResult(valid=not errors, errors=errors)
