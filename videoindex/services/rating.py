"""Five-star rating control with hover preview."""

from collections.abc import Callable

from videoindex.models.feedback import RATING_MAX

RATING_POSITIONS = RATING_MAX

RATING_LABELS = ["", "Poor", "Fair", "Good", "Very Good", "Excellent"]


def rating_label(value: int) -> str:
    """Return the display label for a rating value (empty for 0/unknown)."""
    if 0 <= value < len(RATING_LABELS):
        return RATING_LABELS[value]
    return ""


class RatingControl:
    """Discrete 1..5 selector.

    The selected value lives in the owning form; this control only reads it
    through ``current`` and reports clicks through ``on_select``. The hover
    position is display-only and never written back.
    """

    def __init__(
        self,
        on_select: Callable[[int], bool],
        current: Callable[[], int],
    ) -> None:
        self._on_select = on_select
        self._current = current
        self.hover_position = 0

    @staticmethod
    def _check_position(position: int) -> None:
        if not 1 <= position <= RATING_POSITIONS:
            raise ValueError(
                f"Rating position must be between 1 and {RATING_POSITIONS}, got {position}"
            )

    def hover(self, position: int) -> None:
        self._check_position(position)
        self.hover_position = position

    def leave(self) -> None:
        self.hover_position = 0

    def click(self, position: int) -> bool:
        """Select *position*. Re-clicking the current value keeps it selected."""
        self._check_position(position)
        return self._on_select(position)

    def reset(self) -> None:
        self.hover_position = 0

    @property
    def selected(self) -> int:
        return self._current()

    @property
    def effective_value(self) -> int:
        """Hovered position while hovering, otherwise the selected rating."""
        return self.hover_position or self.selected

    @property
    def label(self) -> str:
        return rating_label(self.effective_value)

    @property
    def show_label(self) -> bool:
        return self.effective_value > 0

    def is_active(self, position: int) -> bool:
        """Whether the star at *position* renders filled."""
        self._check_position(position)
        return position <= self.effective_value
