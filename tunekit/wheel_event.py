"""Wheel events, key and modifier codes, and the scroll state that a wheel handler drives."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

Point = tuple[float, float]


class Modifier(enum.IntFlag):
    """Keyboard modifiers held during an input event."""

    NONE = 0
    SHIFT = 0x02000000
    CONTROL = 0x04000000
    ALT = 0x08000000
    META = 0x10000000
    KEYPAD = 0x20000000


class Key(enum.IntEnum):
    """Keys that take part in keyboard scrolling."""

    HOME = 0x01000010
    END = 0x01000011
    LEFT = 0x01000012
    UP = 0x01000013
    RIGHT = 0x01000014
    DOWN = 0x01000015
    PAGE_UP = 0x01000016
    PAGE_DOWN = 0x01000017


@dataclass
class Flickable:
    """Geometry and content position of a scrollable view.

    ``content_x`` and ``content_y`` grow as the view scrolls right and down.
    ``device_pixel_ratio`` is used to round positions to screen pixels.
    """

    width: float = 0.0
    height: float = 0.0
    content_width: float = 0.0
    content_height: float = 0.0
    content_x: float = 0.0
    content_y: float = 0.0
    origin_x: float = 0.0
    origin_y: float = 0.0
    left_margin: float = 0.0
    right_margin: float = 0.0
    top_margin: float = 0.0
    bottom_margin: float = 0.0
    interactive: bool = True
    device_pixel_ratio: float = 1.0

    @property
    def page_width(self) -> float:
        """Visible width less the horizontal margins."""
        return self.width - self.left_margin - self.right_margin

    @property
    def page_height(self) -> float:
        """Visible height less the vertical margins."""
        return self.height - self.top_margin - self.bottom_margin


@dataclass
class ScrollBar:
    """A scroll bar bound to a view.

    ``item`` is any object with a ``step_size`` attribute and ``increase()``
    and ``decrease()`` methods; without one the bar is not usable.
    """

    item: Optional[Any] = None

    def valid(self) -> bool:
        """True when a scroll bar item is bound."""
        return self.item is not None


@dataclass
class WheelEvent:
    """A mouse wheel event as seen by wheel handler listeners.

    Setting ``accepted`` stops the handler from scrolling for this event.
    """

    x: float = 0.0
    y: float = 0.0
    angle_delta: Point = (0.0, 0.0)
    pixel_delta: Point = (0.0, 0.0)
    buttons: int = 0
    modifiers: Modifier = Modifier.NONE
    inverted: bool = False
    accepted: bool = False

    def initialize_from(self, event: Any) -> None:
        """Copy the data of ``event`` into this one and clear ``accepted``.

        ``event`` has ``angle_delta``, ``pixel_delta``, ``buttons``,
        ``modifiers`` and ``inverted``, plus either a ``position`` pair or
        ``x`` and ``y``.
        """
        position = getattr(event, "position", None)
        if position is not None:
            x, y = position
        else:
            x, y = event.x, event.y
        self.x = float(x)
        self.y = float(y)
        ax, ay = event.angle_delta
        px, py = event.pixel_delta
        self.angle_delta = (float(ax), float(ay))
        self.pixel_delta = (float(px), float(py))
        self.buttons = int(event.buttons)
        self.modifiers = Modifier(int(event.modifiers))
        self.inverted = bool(event.inverted)
        self.accepted = False


def _fuzzy_compare(a: float, b: float) -> bool:
    return abs(a - b) * 1000000000000.0 <= min(abs(a), abs(b))


def fuzzy_less_than_or_equal(a: float, b: float) -> bool:
    """``a <= b``, also true when the two are equal up to rounding error."""
    if a == 0.0 or b == 0.0:
        # Relative comparison breaks down at zero, so shift both values.
        a += 1.0
        b += 1.0
    return a <= b or _fuzzy_compare(a, b)