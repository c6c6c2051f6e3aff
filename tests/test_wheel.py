from dataclasses import dataclass

import pytest

from tunekit.wheel import WheelHandler
from tunekit.wheel_event import Flickable, Key, Modifier, ScrollBar, WheelEvent


@dataclass
class FakeWheel:
    angle_delta: tuple = (0.0, 0.0)
    pixel_delta: tuple = (0.0, 0.0)
    position: tuple = (5.0, 6.0)
    buttons: int = 0
    modifiers: int = 0
    inverted: bool = False
    synthesized: bool = False


class FakeBar:
    def __init__(self, step_size=0.25):
        self.step_size = step_size
        self.calls = []

    def increase(self):
        self.calls.append(("increase", self.step_size))

    def decrease(self):
        self.calls.append(("decrease", self.step_size))


def horizontal_view(content_x=200.0):
    return Flickable(width=100, height=100, content_width=500, content_height=0,
                     content_x=content_x)


def vertical_view(content_y=0.0):
    return Flickable(width=100, height=100, content_width=0, content_height=1000,
                     content_y=content_y)


def test_default_step_size():
    handler = WheelHandler()
    assert handler.vertical_step_size == 60
    assert handler.horizontal_step_size == handler.vertical_step_size


def test_set_vertical_step_emits_once():
    handler = WheelHandler()
    seen = []
    handler.connect("vertical_step_size_changed", lambda: seen.append(1))
    handler.set_vertical_step_size(10)
    handler.set_vertical_step_size(10)
    assert handler.vertical_step_size == 10
    assert len(seen) == 1


def test_zero_step_resets_to_default():
    handler = WheelHandler()
    default = handler.horizontal_step_size
    handler.set_horizontal_step_size(15)
    handler.set_horizontal_step_size(0)
    assert handler.horizontal_step_size == default


def test_scroll_lines_only_affect_implicit_steps():
    handler = WheelHandler(scroll_lines=3)
    before = handler.horizontal_step_size
    handler.set_vertical_step_size(7)
    handler.set_scroll_lines(6)
    assert handler.vertical_step_size == 7
    assert handler.horizontal_step_size == 2 * before


def test_reset_after_scroll_lines_uses_new_default():
    handler = WheelHandler(scroll_lines=3)
    handler.set_vertical_step_size(7)
    handler.set_scroll_lines(6)
    handler.reset_vertical_step_size()
    assert handler.vertical_step_size == handler.horizontal_step_size


def test_no_target_does_not_scroll():
    handler = WheelHandler()
    assert handler.scroll_flickable((10, 0)) is False
    assert handler.scroll_left(10) is False


def test_null_deltas_do_not_scroll():
    view = horizontal_view()
    handler = WheelHandler(view)
    assert handler.scroll_flickable((0, 0), (0, 0)) is False
    assert view.content_x == 200.0


def test_scroll_left_moves_content():
    view = horizontal_view(200.0)
    handler = WheelHandler(view)
    assert handler.scroll_left(30) is True
    assert view.content_x == 200.0 - 30


def test_scroll_left_clamps_at_start():
    view = horizontal_view(10.0)
    handler = WheelHandler(view)
    assert handler.scroll_left(30) is True
    assert view.content_x == view.origin_x - view.left_margin


def test_scroll_right_clamps_at_end():
    view = horizontal_view(390.0)
    handler = WheelHandler(view)
    assert handler.scroll_right(30) is True
    assert view.content_x + view.width == view.content_width


def test_scroll_zero_step_is_ignored():
    view = horizontal_view()
    handler = WheelHandler(view)
    assert handler.scroll_left(0) is False
    assert view.content_x == 200.0


def test_negative_step_uses_horizontal_step():
    view = horizontal_view(200.0)
    handler = WheelHandler(view)
    handler.set_horizontal_step_size(25)
    handler.scroll_left(-1)
    assert view.content_x == 200.0 - 25


def test_position_rounded_to_device_pixels():
    view = horizontal_view(100.0)
    view.device_pixel_ratio = 2.0
    handler = WheelHandler(view)
    handler.scroll_left(0.3)
    assert (view.content_x * 2).is_integer()
    assert 99.0 <= view.content_x <= 100.0


def test_scroll_bar_used_when_bound():
    view = horizontal_view(200.0)
    handler = WheelHandler(view)
    bar = FakeBar(step_size=0.25)
    handler.horizontal_scroll_bar = ScrollBar(bar)
    assert handler.scroll_left(50) is True
    assert bar.calls == [("decrease", 50 / 500)]
    assert bar.step_size == 0.25
    assert view.content_x == 200.0


def test_scroll_bar_not_moved_at_beginning():
    view = horizontal_view(0.0)
    handler = WheelHandler(view)
    bar = FakeBar()
    handler.horizontal_scroll_bar = ScrollBar(bar)
    assert handler.scroll_left(50) is False
    assert bar.calls == []


def test_wheel_scrolls_by_vertical_step():
    view = vertical_view(0.0)
    handler = WheelHandler(view)
    moved = []
    handler.connect("wheel_moved", lambda: moved.append(1))
    assert handler.handle_wheel(FakeWheel(angle_delta=(0, -120))) is True
    assert view.content_y == handler.vertical_step_size
    assert moved == [1]


def test_wheel_listener_receives_event_and_can_accept():
    view = vertical_view(0.0)
    handler = WheelHandler(view)
    events = []

    def accept(event):
        events.append((event.x, event.y, event.angle_delta))
        event.accepted = True

    handler.connect("wheel", accept)
    assert handler.handle_wheel(FakeWheel(angle_delta=(0, -120))) is True
    assert events == [(5.0, 6.0, (0.0, -120.0))]
    assert view.content_y == 0.0


def test_wheel_pixel_delta_equal_to_angle_is_dropped():
    view = vertical_view(0.0)
    handler = WheelHandler(view)
    seen = []
    handler.connect("wheel", lambda e: seen.append(e.pixel_delta))
    handler.handle_wheel(FakeWheel(angle_delta=(0, -120), pixel_delta=(0, -120)))
    assert seen == [(0.0, 0.0)]


def test_wheel_not_scrolled_passes_through_when_not_blocking():
    view = vertical_view(900.0)
    handler = WheelHandler(view)
    handler.block_target_wheel = False
    assert handler.handle_wheel(FakeWheel(angle_delta=(0, -120))) is False
    assert view.content_y == 900.0


def test_wheel_gesture_always_blocked():
    view = vertical_view(900.0)
    handler = WheelHandler(view)
    handler.block_target_wheel = False
    event = FakeWheel(angle_delta=(0, -120), pixel_delta=(0, -5), synthesized=True)
    assert handler.handle_wheel(event) is True


def test_wheel_page_modifier_scrolls_a_page():
    view = vertical_view(0.0)
    handler = WheelHandler(view)
    event = FakeWheel(angle_delta=(0, -120), modifiers=int(Modifier.CONTROL))
    assert handler.handle_wheel(event) is True
    assert view.content_y == view.page_height


def test_wheel_ignored_when_not_interactive():
    view = vertical_view(0.0)
    view.interactive = False
    handler = WheelHandler(view)
    assert handler.handle_wheel(FakeWheel(angle_delta=(0, -120))) is False
    assert view.content_y == 0.0


def test_key_navigation_disabled_by_default():
    view = horizontal_view(200.0)
    handler = WheelHandler(view)
    assert handler.handle_key(Key.LEFT) is False
    assert view.content_x == 200.0


def test_key_left_scrolls_by_step():
    view = horizontal_view(200.0)
    handler = WheelHandler(view)
    handler.key_navigation_enabled = True
    assert handler.handle_key(Key.LEFT) is True
    assert view.content_x == 200.0 - handler.horizontal_step_size


def test_key_home_with_alt_goes_to_start():
    view = horizontal_view(300.0)
    handler = WheelHandler(view)
    handler.key_navigation_enabled = True
    assert handler.handle_key(Key.HOME, Modifier.ALT) is True
    assert view.content_x == view.origin_x


def test_key_navigation_signal():
    handler = WheelHandler()
    seen = []
    handler.connect("key_navigation_enabled_changed", lambda: seen.append(1))
    handler.key_navigation_enabled = True
    handler.key_navigation_enabled = True
    assert handler.key_navigation_enabled is True
    assert seen == [1]


def test_target_must_be_flickable():
    handler = WheelHandler()
    with pytest.raises(TypeError):
        handler.target = object()


def test_target_change_emits():
    handler = WheelHandler()
    seen = []
    handler.connect("target_changed", lambda: seen.append(1))
    view = horizontal_view()
    handler.target = view
    handler.target = view
    assert handler.target is view
    assert seen == [1]


def test_unknown_signal_rejected():
    handler = WheelHandler()
    with pytest.raises(ValueError):
        handler.connect("nope", lambda: None)


def test_page_scroll_modifiers_reset_with_none():
    handler = WheelHandler()
    default = handler.page_scroll_modifiers
    handler.page_scroll_modifiers = Modifier.META
    assert handler.page_scroll_modifiers == Modifier.META
    handler.page_scroll_modifiers = None
    assert handler.page_scroll_modifiers == default


def test_wheel_event_reused_and_reset():
    view = vertical_view(0.0)
    handler = WheelHandler(view)
    events = []
    handler.connect("wheel", events.append)
    handler.handle_wheel(FakeWheel(angle_delta=(0, -120)))
    handler.handle_wheel(FakeWheel(angle_delta=(0, 120)))
    assert isinstance(events[0], WheelEvent)
    assert events[1].accepted is False
    assert view.content_y == 0.0