"""Tests for the rating control."""

import pytest

from videoindex.services.rating import RATING_LABELS, RatingControl, rating_label


class _Holder:
    """Stands in for the form that owns the selected value."""

    def __init__(self, editable: bool = True) -> None:
        self.value = 0
        self.editable = editable

    def select(self, value: int) -> bool:
        if not self.editable:
            return False
        self.value = value
        return True


def _control(editable: bool = True) -> tuple[RatingControl, _Holder]:
    holder = _Holder(editable)
    return RatingControl(on_select=holder.select, current=lambda: holder.value), holder


@pytest.mark.parametrize(
    ("value", "label"),
    [(0, ""), (1, "Poor"), (2, "Fair"), (3, "Good"), (4, "Very Good"), (5, "Excellent")],
)
def test_rating_label(value, label):
    assert rating_label(value) == label


def test_rating_label_out_of_range_is_empty():
    assert rating_label(9) == ""
    assert rating_label(-1) == ""
    assert len(RATING_LABELS) == 6


def test_click_sets_value_and_reclick_keeps_it():
    control, holder = _control()
    assert control.click(3) is True
    assert holder.value == 3
    control.click(3)
    assert holder.value == 3
    assert control.selected == 3


def test_hover_previews_without_changing_selection():
    control, holder = _control()
    control.click(2)
    control.hover(5)
    assert control.effective_value == 5
    assert control.label == "Excellent"
    assert holder.value == 2

    control.leave()
    assert control.effective_value == 2
    assert control.label == "Fair"


def test_label_hidden_when_nothing_selected_or_hovered():
    control, _ = _control()
    assert control.show_label is False
    assert control.label == ""
    control.hover(1)
    assert control.show_label is True


def test_active_stars_follow_effective_value():
    control, _ = _control()
    control.click(3)
    assert [control.is_active(k) for k in range(1, 6)] == [True, True, True, False, False]
    control.hover(4)
    assert control.is_active(4) is True


def test_rejected_click_leaves_selection():
    control, holder = _control(editable=False)
    assert control.click(4) is False
    assert holder.value == 0


@pytest.mark.parametrize("position", [0, 6, -1])
def test_positions_outside_range_raise(position):
    control, _ = _control()
    with pytest.raises(ValueError):
        control.click(position)
    with pytest.raises(ValueError):
        control.hover(position)


def test_reset_clears_hover():
    control, _ = _control()
    control.hover(3)
    control.reset()
    assert control.hover_position == 0
