"""Search-page widgets: the action button bar and the search box."""

import logging
from collections.abc import Callable
from typing import Any

from videoindex.models.feedback import FeedbackDraft
from videoindex.services.feedback_modal import FeedbackModal
from videoindex.services.scheduler import Scheduler

logger = logging.getLogger(__name__)

SEARCH_PLACEHOLDER_COMPACT = "Search pods..."
SEARCH_PLACEHOLDER = "Search learning pods with AI precision..."
SEARCH_HINT = 'Try "React" or "JavaScript"'


class ActionBar:
    """Action buttons (create pod, feedback). Owns the feedback modal."""

    def __init__(
        self,
        on_create_pod: Callable[[], Any],
        *,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._on_create_pod = on_create_pod
        self.feedback_open = False
        self.feedback_modal = FeedbackModal(
            on_submit=self.handle_feedback_submit,
            on_close=self.handle_feedback_close,
            scheduler=scheduler,
        )

    def create_pod(self) -> None:
        self._on_create_pod()

    def open_feedback(self) -> None:
        self.feedback_open = True
        self.feedback_modal.open()

    def handle_feedback_submit(self, data: FeedbackDraft) -> None:
        # Feedback is only logged; nothing is sent or stored
        logger.info("Feedback submitted: %s", data.model_dump(mode="json"))

    def handle_feedback_close(self) -> None:
        self.feedback_open = False


class SearchBox:
    """Free-text search input. Every change is reported immediately."""

    def __init__(self, on_search: Callable[[str], Any]) -> None:
        self._on_search = on_search
        self.query = ""

    def change(self, value: str) -> None:
        self.query = value
        self._on_search(value)

    @property
    def show_hint(self) -> bool:
        return not self.query
