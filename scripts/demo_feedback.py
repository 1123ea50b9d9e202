"""Walk the feedback modal through a full submission from the command line.

Usage:
    python -m scripts.demo_feedback            # default timings from settings
    python -m scripts.demo_feedback --fast     # shrink both timers to 0.1s
"""

import asyncio
import logging
import sys

from videoindex.models.feedback import FeedbackCategory
from videoindex.services.widgets import ActionBar

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


async def main() -> int:
    fast = "--fast" in sys.argv

    bar = ActionBar(on_create_pod=lambda: print("Create pod clicked."))
    modal = bar.feedback_modal
    if fast:
        modal.submit_latency = 0.1
        modal.auto_close_delay = 0.1

    bar.open_feedback()
    modal.set_name("Ana")
    modal.set_email("a@b.co")
    modal.rating.click(4)
    modal.set_category(FeedbackCategory.BUG)
    modal.set_feedback_text("Found a crash")

    if not modal.submit():
        print(f"Validation failed: {modal.errors}")
        return 1

    await modal.wait_closed()
    print("States: " + " -> ".join(state.value for state in modal.history))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
