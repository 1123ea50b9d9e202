"""Feedback modal — lifecycle state machine around the feedback form.

States: CLOSED -> EDITING -> SUBMITTING -> SUBMITTED -> CLOSED.

Both timed steps (simulated submission latency and the auto-close
countdown) go through a Scheduler. Every scheduled callback captures the
epoch it was launched in; ``open()`` and ``close()`` bump the epoch, so a
callback from an earlier cycle cannot change the modal. A submission that
completes after close still reaches ``on_submit``.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from videoindex.config import get_settings
from videoindex.models.feedback import (
    FEEDBACK_CATEGORIES,
    FeedbackCategory,
    FeedbackDraft,
    FieldErrors,
    ModalState,
)
from videoindex.services.feedback_form import FeedbackForm
from videoindex.services.rating import RatingControl
from videoindex.services.scheduler import AsyncioScheduler, Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class FeedbackModal:
    """Feedback collection modal.

    Args:
        on_submit: Called once per successful submission, after the simulated
            latency, with a snapshot of the draft taken at submit time.
        on_close: Called once per transition into CLOSED (manual or automatic).
        scheduler: Timer source. Defaults to the asyncio event loop.
        submit_latency: Seconds before a submission completes. Defaults to
            ``Settings.submit_latency``.
        auto_close_delay: Seconds the success view stays up. Defaults to
            ``Settings.auto_close_delay``.
    """

    categories = FEEDBACK_CATEGORIES

    def __init__(
        self,
        on_submit: Callable[[FeedbackDraft], Any],
        on_close: Callable[[], Any],
        *,
        scheduler: Scheduler | None = None,
        submit_latency: float | None = None,
        auto_close_delay: float | None = None,
    ) -> None:
        settings = get_settings()
        self._on_submit = on_submit
        self._on_close = on_close
        self._scheduler = scheduler or AsyncioScheduler()
        self.submit_latency = (
            settings.submit_latency if submit_latency is None else submit_latency
        )
        self.auto_close_delay = (
            settings.auto_close_delay if auto_close_delay is None else auto_close_delay
        )

        self.state = ModalState.CLOSED
        self.epoch = 0
        self.history: list[ModalState] = [ModalState.CLOSED]
        self.form = FeedbackForm()
        self.rating = RatingControl(
            on_select=self.set_rating, current=lambda: self.form.draft.rating
        )

        self._auto_close: TimerHandle | None = None
        self._closed_waiters: list[asyncio.Future[None]] = []

    # -- views ---------------------------------------------------------------

    @property
    def draft(self) -> FeedbackDraft:
        return self.form.draft

    @property
    def errors(self) -> FieldErrors:
        return self.form.errors

    @property
    def is_open(self) -> bool:
        return self.state is not ModalState.CLOSED

    @property
    def submit_disabled(self) -> bool:
        return self.state is not ModalState.EDITING

    @property
    def sub_view(self) -> str | None:
        """Which body renders: nothing, the form, or the thank-you screen."""
        if self.state is ModalState.CLOSED:
            return None
        if self.state is ModalState.SUBMITTED:
            return "success"
        return "form"

    @property
    def character_count(self) -> str:
        return self.form.character_count

    # -- lifecycle -------------------------------------------------------------

    def _enter(self, state: ModalState) -> None:
        logger.info(
            "Feedback modal %s -> %s (epoch %d)",
            self.state.value,
            state.value,
            self.epoch,
        )
        self.state = state
        self.history.append(state)

    def _reset(self) -> None:
        self.form.reset()
        self.rating.reset()

    def open(self) -> None:
        """Show the modal with an empty draft. No-op unless CLOSED."""
        if self.state is not ModalState.CLOSED:
            logger.debug("open() ignored while %s", self.state.value)
            return
        self.epoch += 1
        self._reset()
        # history covers the current open/close cycle only
        self.history = [ModalState.CLOSED]
        self._enter(ModalState.EDITING)

    def close(self) -> None:
        """Discard the draft and hide the modal. Idempotent.

        An in-flight submission keeps running and still reaches on_submit,
        but the epoch check stops it from touching this modal again. The
        auto-close countdown is cancelled.
        """
        if self.state is ModalState.CLOSED:
            return
        self.epoch += 1
        if self._auto_close is not None:
            self._auto_close.cancel()
            self._auto_close = None
        self._reset()
        self._enter(ModalState.CLOSED)
        self._on_close()

        waiters, self._closed_waiters = self._closed_waiters, []
        for waiter in waiters:
            if not waiter.done():
                waiter.set_result(None)

    async def wait_closed(self) -> None:
        """Wait until the modal returns to CLOSED."""
        if self.state is ModalState.CLOSED:
            return
        waiter: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._closed_waiters.append(waiter)
        await waiter

    # -- submission ------------------------------------------------------------

    def submit(self) -> bool:
        """Validate and, if clean, start the simulated submission.

        Returns True if a submission was started. Invalid drafts stay in
        EDITING with ``errors`` populated.
        """
        if self.state is not ModalState.EDITING:
            logger.debug("submit() ignored while %s", self.state.value)
            return False

        if not self.form.validate():
            logger.info(
                "Feedback rejected with %d field error(s): %s",
                len(self.errors),
                ", ".join(sorted(self.errors)),
            )
            return False

        snapshot = self.form.snapshot()
        self._enter(ModalState.SUBMITTING)
        epoch = self.epoch
        self._scheduler.call_later(
            self.submit_latency,
            lambda: self._complete_submission(epoch, snapshot),
        )
        return True

    def _complete_submission(self, epoch: int, snapshot: FeedbackDraft) -> None:
        self._on_submit(snapshot)
        if epoch != self.epoch:
            # Closed while submitting, or closed from inside on_submit
            logger.debug("Submission from epoch %d completed after close", epoch)
            return

        self._enter(ModalState.SUBMITTED)
        self._auto_close = self._scheduler.call_later(
            self.auto_close_delay,
            lambda: self._auto_close_elapsed(epoch),
        )

    def _auto_close_elapsed(self, epoch: int) -> None:
        if epoch != self.epoch:
            logger.debug("Discarding stale auto-close from epoch %d", epoch)
            return
        self._auto_close = None
        self.close()

    # -- field edits -----------------------------------------------------------

    def _edit(self, field: str, value: Any) -> bool:
        if self.state is not ModalState.EDITING:
            logger.debug("Ignoring %s edit while %s", field, self.state.value)
            return False
        self.form.update(field, value)
        return True

    def set_name(self, value: str) -> bool:
        return self._edit("name", value)

    def set_email(self, value: str) -> bool:
        return self._edit("email", value)

    def set_rating(self, value: int) -> bool:
        return self._edit("rating", value)

    def set_category(self, value: FeedbackCategory | str) -> bool:
        return self._edit("category", value)

    def set_feedback_text(self, value: str) -> bool:
        return self._edit("feedback_text", value)
