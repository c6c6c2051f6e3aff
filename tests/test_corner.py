import pytest

from tunekit.corner import (
    CornersGroup,
    Tracker,
    TrackKind,
    corner,
    corners,
    hover_color,
    press_color,
    transparent,
)


def test_number_sets_all_corners():
    c = corner(4.0)
    assert c == CornersGroup(4.0, 4.0, 4.0, 4.0)


def test_single_item_list_sets_all_corners():
    assert corner([6]) == CornersGroup.uniform(6.0)


def test_two_values_top_and_bottom():
    c = corner([1, 2])
    assert (c.top_left, c.top_right) == (1.0, 1.0)
    assert (c.bottom_left, c.bottom_right) == (2.0, 2.0)


def test_three_values_reuse_top_right_for_bottom_right():
    c = corner([1, 2, 3])
    assert c.top_left == 1.0
    assert c.top_right == 2.0
    assert c.bottom_left == 3.0
    assert c.bottom_right == 2.0


def test_four_or_more_values_use_first_four():
    c = corner([1, 2, 3, 4, 5])
    assert c == corner([1, 2, 3, 4])
    assert (c.top_left, c.top_right, c.bottom_left, c.bottom_right) == (1, 2, 3, 4)


def test_empty_or_other_input_gives_default():
    assert corner([]) == CornersGroup()
    assert corner("x") == CornersGroup()
    assert corner(None) == CornersGroup()


def test_corners_argument_order_and_vector():
    c = corners(1, 2, 3, 4)
    assert c.bottom_right == 1 and c.top_right == 2
    assert c.bottom_left == 3 and c.top_left == 4
    assert c.to_vector4d() == (1, 2, 3, 4)


def test_transparent_replaces_alpha():
    assert transparent((0.1, 0.2, 0.3, 1.0), 0.5) == (0.1, 0.2, 0.3, 0.5)
    assert transparent((0.1, 0.2, 0.3), 0.25) == (0.1, 0.2, 0.3, 0.25)


def test_hover_and_press_alpha():
    assert hover_color((1, 1, 1))[3] == 0.08
    assert press_color((1, 1, 1, 1))[3] == 0.18


def test_transparent_rejects_bad_input():
    with pytest.raises(ValueError):
        transparent((0.1, 0.2), 0.5)
    with pytest.raises(ValueError):
        transparent((0.1, 0.2, 0.3), 1.5)


def test_tracker_counts():
    tracker = Tracker()
    assert tracker.track(TrackKind.CREATE) == 1
    assert tracker.track(TrackKind.CREATE) == 2
    assert tracker.track(TrackKind.DELETE) == 1
    assert tracker.count == 1