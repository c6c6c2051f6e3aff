"""Scroll a view with the mouse wheel and the keyboard."""

from __future__ import annotations

import logging
import math
import time
from typing import Any, Callable, Optional, Union

from tunekit.wheel_event import (
    Flickable,
    Key,
    Modifier,
    Point,
    ScrollBar,
    WheelEvent,
    fuzzy_less_than_or_equal,
)

_log = logging.getLogger(__name__)

DEFAULT_SCROLL_LINES = 3
WHEEL_SCROLLING_DURATION = 0.4
DEFAULT_HORIZONTAL_SCROLL_MODIFIERS = Modifier.ALT
DEFAULT_PAGE_SCROLL_MODIFIERS = Modifier.CONTROL | Modifier.SHIFT

_SIGNALS = (
    "target_changed",
    "vertical_step_size_changed",
    "horizontal_step_size_changed",
    "page_scroll_modifiers_changed",
    "filter_mouse_events_changed",
    "key_navigation_enabled_changed",
    "block_target_wheel_changed",
    "scroll_flickable_target_changed",
    "use_animation_changed",
    "wheel",
    "wheel_moved",
)


def _fuzzy_compare(a: float, b: float) -> bool:
    return abs(a - b) * 1000000000000.0 <= min(abs(a), abs(b))


def _fuzzy_is_null(value: float) -> bool:
    return abs(value) <= 0.000000000001


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _is_null(point: Point) -> bool:
    return point[0] == 0.0 and point[1] == 0.0


class WheelHandler:
    """Scrolls a :class:`Flickable` from wheel events and key presses.

    Step sizes default to ``20`` pixels per configured scroll line. When a
    scroll bar item is bound for an axis, scrolling goes through the bar's
    ``increase()`` and ``decrease()``; otherwise the content position is
    moved directly, clamped to the content extent and rounded to pixels.
    """

    def __init__(
        self,
        target: Optional[Flickable] = None,
        *,
        scroll_lines: int = DEFAULT_SCROLL_LINES,
        platform_name: str = "",
    ) -> None:
        self.platform_name = platform_name
        self.vertical_scroll_bar = ScrollBar()
        self.horizontal_scroll_bar = ScrollBar()

        self._default_step = 20.0 * scroll_lines
        self._vertical_step = self._default_step
        self._horizontal_step = self._default_step
        self._explicit_v_step = False
        self._explicit_h_step = False

        self._page_scroll_modifiers = DEFAULT_PAGE_SCROLL_MODIFIERS
        self._filter_mouse_events = False
        self._key_navigation_enabled = False
        self._block_target_wheel = True
        self._scroll_flickable_target = True
        self._use_animation = False

        self._wheel_scrolling = False
        self._scroll_deadline: Optional[float] = None
        self._event = WheelEvent()
        self._listeners: dict[str, list[Callable[..., Any]]] = {s: [] for s in _SIGNALS}

        self._target: Optional[Flickable] = None
        if target is not None:
            self.target = target

    # signals

    def connect(self, signal: str, callback: Callable[..., Any]) -> None:
        """Call ``callback`` whenever ``signal`` is emitted.

        The ``wheel`` signal passes the :class:`WheelEvent`; the others pass
        nothing.
        """
        if signal not in self._listeners:
            raise ValueError(f"unknown signal: {signal}")
        self._listeners[signal].append(callback)

    def _emit(self, signal: str, *args: Any) -> None:
        for callback in list(self._listeners[signal]):
            callback(*args)

    # properties

    @property
    def target(self) -> Optional[Flickable]:
        """The view that is scrolled."""
        return self._target

    @target.setter
    def target(self, value: Optional[Flickable]) -> None:
        if value is self._target:
            return
        if value is not None and not isinstance(value, Flickable):
            raise TypeError("target must be a Flickable")
        self._target = value
        self._emit("target_changed")

    @property
    def vertical_step_size(self) -> float:
        return self._vertical_step

    @vertical_step_size.setter
    def vertical_step_size(self, step: float) -> None:
        self.set_vertical_step_size(step)

    @property
    def horizontal_step_size(self) -> float:
        return self._horizontal_step

    @horizontal_step_size.setter
    def horizontal_step_size(self, step: float) -> None:
        self.set_horizontal_step_size(step)

    @property
    def page_scroll_modifiers(self) -> Modifier:
        """Modifiers that make the wheel scroll by whole pages."""
        return self._page_scroll_modifiers

    @page_scroll_modifiers.setter
    def page_scroll_modifiers(self, modifiers: Union[Modifier, int, None]) -> None:
        value = (
            DEFAULT_PAGE_SCROLL_MODIFIERS if modifiers is None else Modifier(int(modifiers))
        )
        if value == self._page_scroll_modifiers:
            return
        self._page_scroll_modifiers = value
        self._emit("page_scroll_modifiers_changed")

    @property
    def filter_mouse_events(self) -> bool:
        return self._filter_mouse_events

    @filter_mouse_events.setter
    def filter_mouse_events(self, enabled: bool) -> None:
        if enabled == self._filter_mouse_events:
            return
        self._filter_mouse_events = enabled
        self._emit("filter_mouse_events_changed")

    @property
    def key_navigation_enabled(self) -> bool:
        """Whether arrow, page and home/end keys scroll the view."""
        return self._key_navigation_enabled

    @key_navigation_enabled.setter
    def key_navigation_enabled(self, enabled: bool) -> None:
        if enabled == self._key_navigation_enabled:
            return
        self._key_navigation_enabled = enabled
        self._emit("key_navigation_enabled_changed")

    @property
    def block_target_wheel(self) -> bool:
        """Whether every wheel event is kept from reaching the view."""
        return self._block_target_wheel

    @block_target_wheel.setter
    def block_target_wheel(self, value: bool) -> None:
        if value == self._block_target_wheel:
            return
        self._block_target_wheel = value
        self._emit("block_target_wheel_changed")

    @property
    def scroll_flickable_target(self) -> bool:
        """Whether wheel events scroll the view."""
        return self._scroll_flickable_target

    @scroll_flickable_target.setter
    def scroll_flickable_target(self, value: bool) -> None:
        if value == self._scroll_flickable_target:
            return
        self._scroll_flickable_target = value
        self._emit("scroll_flickable_target_changed")

    @property
    def use_animation(self) -> bool:
        return self._use_animation

    @use_animation.setter
    def use_animation(self, value: bool) -> None:
        old, self._use_animation = self._use_animation, value
        if old != value:
            self._emit("use_animation_changed")

    @property
    def scrolling(self) -> bool:
        """Whether a wheel scroll happened recently."""
        if (
            self._wheel_scrolling
            and self._scroll_deadline is not None
            and time.monotonic() >= self._scroll_deadline
        ):
            self._wheel_scrolling = False
            self._scroll_deadline = None
        return self._wheel_scrolling

    def _set_scrolling(self, scrolling: bool) -> None:
        if self._wheel_scrolling == scrolling:
            if scrolling:
                self._scroll_deadline = time.monotonic() + WHEEL_SCROLLING_DURATION
            return
        self._wheel_scrolling = scrolling

    # step sizes

    def set_vertical_step_size(self, step: float) -> None:
        """Set the vertical step explicitly; zero restores the default."""
        self._explicit_v_step = True
        if _fuzzy_compare(self._vertical_step, step):
            return
        if _fuzzy_is_null(step):
            self.reset_vertical_step_size()
            return
        self._vertical_step = step
        self._emit("vertical_step_size_changed")

    def reset_vertical_step_size(self) -> None:
        """Go back to the default vertical step."""
        self._explicit_v_step = False
        if _fuzzy_compare(self._vertical_step, self._default_step):
            return
        self._vertical_step = self._default_step
        self._emit("vertical_step_size_changed")

    def set_horizontal_step_size(self, step: float) -> None:
        """Set the horizontal step explicitly; zero restores the default."""
        self._explicit_h_step = True
        if _fuzzy_compare(self._horizontal_step, step):
            return
        if _fuzzy_is_null(step):
            self.reset_horizontal_step_size()
            return
        self._horizontal_step = step
        self._emit("horizontal_step_size_changed")

    def reset_horizontal_step_size(self) -> None:
        """Go back to the default horizontal step."""
        self._explicit_h_step = False
        if _fuzzy_compare(self._horizontal_step, self._default_step):
            return
        self._horizontal_step = self._default_step
        self._emit("horizontal_step_size_changed")

    def set_scroll_lines(self, lines: int) -> None:
        """Change the lines per wheel notch; steps not set explicitly follow."""
        self._default_step = 20.0 * lines
        if not self._explicit_v_step and self._vertical_step != self._default_step:
            self._vertical_step = self._default_step
            self._emit("vertical_step_size_changed")
        if not self._explicit_h_step and self._horizontal_step != self._default_step:
            self._horizontal_step = self._default_step
            self._emit("horizontal_step_size_changed")

    # scrolling

    def scroll_flickable(
        self,
        pixel_delta: Point,
        angle_delta: Point = (0.0, 0.0),
        modifiers: Union[Modifier, int] = Modifier.NONE,
    ) -> bool:
        """Scroll the target by a wheel delta; True if anything moved."""
        target = self._target
        pixel = (float(pixel_delta[0]), float(pixel_delta[1]))
        angle = (float(angle_delta[0]), float(angle_delta[1]))
        if target is None or (_is_null(pixel) and _is_null(angle)):
            return False
        mods = Modifier(int(modifiers))

        scrolled = False
        for horizontal in (True, False):
            if horizontal:
                size, content_size = target.width, target.content_width
                content_pos = target.content_x
                begin_margin, end_margin = target.left_margin, target.right_margin
                origin = target.origin_x
            else:
                size, content_size = target.height, target.content_height
                content_pos = target.content_y
                begin_margin, end_margin = target.top_margin, target.bottom_margin
                origin = target.origin_y
            page_size = size - begin_margin - end_margin
            ratio = target.device_pixel_ratio

            min_extent = origin - begin_margin
            max_extent = max(min_extent, (content_size + begin_margin + origin) - size)
            at_beginning = fuzzy_less_than_or_equal(content_pos, min_extent)
            at_end = fuzzy_less_than_or_equal(max_extent, content_pos)

            # Each pass transposes again when the horizontal modifier is held.
            if mods & DEFAULT_HORIZONTAL_SCROLL_MODIFIERS and self.platform_name != "xcb":
                angle = (angle[1], angle[0])
                pixel = (pixel[1], pixel[0])

            ticks = (angle[0] if horizontal else angle[1]) / 120
            step = self._horizontal_step if horizontal else self._vertical_step
            bar = self.horizontal_scroll_bar if horizontal else self.vertical_scroll_bar

            if content_size <= page_size:
                continue

            if mods & self._page_scroll_modifiers:
                change = min(max(ticks * page_size, -page_size), page_size)
            elif pixel[0] != 0:
                change = pixel[0]
            else:
                change = ticks * step

            if bar.valid():
                if (change > 0 and not at_beginning) or (change < 0 and not at_end):
                    item = bar.item
                    saved = item.step_size
                    item.step_size = min(max(abs(change) / content_size, 0.0), 1.0)
                    if change > 0:
                        item.decrease()
                    else:
                        item.increase()
                    item.step_size = saved
                    scrolled = True
            else:
                new_pos = min(max(content_pos - change, min_extent), max_extent)
                new_pos = _round_half_away(new_pos * ratio) / ratio
                if content_pos != new_pos:
                    scrolled = True
                    if horizontal:
                        target.content_x = new_pos
                    else:
                        target.content_y = new_pos
        return scrolled

    def _step_or_default(self, step: float, default: float) -> Optional[float]:
        if _fuzzy_is_null(step):
            return None
        return default if step < 0 else step

    def scroll_up(self, step: float = -1) -> bool:
        """Scroll up by ``step``, or by the vertical step when negative."""
        value = self._step_or_default(step, self._vertical_step)
        if value is None:
            return False
        return self.scroll_flickable((0.0, value))

    def scroll_down(self, step: float = -1) -> bool:
        """Scroll down by ``step``, or by the vertical step when negative."""
        value = self._step_or_default(step, self._vertical_step)
        if value is None:
            return False
        return self.scroll_flickable((0.0, -value))

    def scroll_left(self, step: float = -1) -> bool:
        """Scroll left by ``step``, or by the horizontal step when negative."""
        value = self._step_or_default(step, self._horizontal_step)
        if value is None:
            return False
        return self.scroll_flickable((value, 0.0))

    def scroll_right(self, step: float = -1) -> bool:
        """Scroll right by ``step``, or by the horizontal step when negative."""
        value = self._step_or_default(step, self._horizontal_step)
        if value is None:
            return False
        return self.scroll_flickable((-value, 0.0))

    # events

    def _active(self) -> bool:
        return self._target is not None and self._target.interactive

    def _page_sizes(self) -> tuple[float, float, float, float]:
        target = self._target
        if target is None:
            return 0.0, 0.0, 0.0, 0.0
        return (
            target.content_width,
            target.content_height,
            target.page_width,
            target.page_height,
        )

    def handle_wheel(self, event: Any) -> bool:
        """Handle a wheel event; True when it should not reach the view.

        ``event`` carries what :meth:`WheelEvent.initialize_from` reads, and
        may have a ``synthesized`` flag for events made from touch gestures.
        """
        if not self._active():
            return False
        content_width, content_height, page_width, page_height = self._page_sizes()

        wheel = self._event
        wheel.initialize_from(event)
        original_pixel = wheel.pixel_delta
        if wheel.pixel_delta == wheel.angle_delta:
            wheel.pixel_delta = (0.0, 0.0)

        self._emit("wheel", wheel)
        if wheel.accepted:
            return True

        scrolled = False
        if self._scroll_flickable_target or (
            content_height <= page_height and content_width <= page_width
        ):
            pixel = wheel.pixel_delta if _is_null(wheel.angle_delta) else (0.0, 0.0)
            scrolled = self.scroll_flickable(pixel, wheel.angle_delta, wheel.modifiers)
        self._set_scrolling(scrolled)

        gesture = bool(getattr(event, "synthesized", False)) and not _is_null(original_pixel)
        if scrolled:
            self._emit("wheel_moved")
        return scrolled or self._block_target_wheel or gesture

    def handle_key(self, key: Union[Key, int], modifiers: Union[Modifier, int] = Modifier.NONE) -> bool:
        """Handle a key press; True when it scrolled the view."""
        if not self._active() or not self._key_navigation_enabled:
            return False
        content_width, content_height, page_width, page_height = self._page_sizes()
        horizontal = bool(Modifier(int(modifiers)) & DEFAULT_HORIZONTAL_SCROLL_MODIFIERS)
        try:
            key = Key(int(key))
        except ValueError:
            return False
        if key is Key.UP:
            return self.scroll_up()
        if key is Key.DOWN:
            return self.scroll_down()
        if key is Key.LEFT:
            return self.scroll_left()
        if key is Key.RIGHT:
            return self.scroll_right()
        if key is Key.PAGE_UP:
            return self.scroll_left(page_width) if horizontal else self.scroll_up(page_height)
        if key is Key.PAGE_DOWN:
            return self.scroll_right(page_width) if horizontal else self.scroll_down(page_height)
        if key is Key.HOME:
            return self.scroll_left(content_width) if horizontal else self.scroll_up(content_height)
        if key is Key.END:
            return (
                self.scroll_right(content_width) if horizontal else self.scroll_down(content_height)
            )
        return False