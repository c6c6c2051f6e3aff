"""Temporarily replace which input events a target item accepts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

_SIGNALS = (
    "when_changed",
    "target_changed",
    "accept_mouse_buttons_changed",
    "accept_hover_events_changed",
    "accept_touch_events_changed",
)


@dataclass
class InputState:
    """Which input a target accepts: hover, touch and a mouse button mask."""

    can_hover: bool = False
    can_touch: bool = False
    mouse_buttons: int = 0

    def save(self, target: Any) -> None:
        """Record the accepted input of ``target``."""
        self.can_hover = target.accept_hover_events
        self.can_touch = target.accept_touch_events
        self.mouse_buttons = target.accepted_mouse_buttons

    def restore(self, target: Any) -> None:
        """Apply this state to ``target``."""
        target.accepted_mouse_buttons = self.mouse_buttons
        target.accept_touch_events = self.can_touch
        target.accept_hover_events = self.can_hover


class InputBlock:
    """While ``when`` is true, the target accepts only the requested input.

    The target's own state is saved when it is attached and put back when
    ``when`` turns false or another target is chosen. The target is any
    object with ``accept_hover_events``, ``accept_touch_events`` and
    ``accepted_mouse_buttons`` attributes.
    """

    def __init__(self) -> None:
        self._when = False
        self._target: Optional[Any] = None
        self._state = InputState()
        self._requested = InputState()
        self._listeners: dict[str, list[Callable[[], Any]]] = {s: [] for s in _SIGNALS}

    def connect(self, signal: str, callback: Callable[[], Any]) -> None:
        """Call ``callback`` whenever ``signal`` is emitted."""
        if signal not in self._listeners:
            raise ValueError(f"unknown signal: {signal}")
        self._listeners[signal].append(callback)

    def _emit(self, signal: str) -> None:
        for callback in list(self._listeners[signal]):
            callback()
        self.trigger()

    @property
    def when(self) -> bool:
        """Whether the requested state is applied to the target."""
        return self._when

    @when.setter
    def when(self, value: bool) -> None:
        old, self._when = self._when, value
        if old != value:
            self._emit("when_changed")

    @property
    def target(self) -> Optional[Any]:
        """The item whose input is controlled."""
        return self._target

    @target.setter
    def target(self, value: Optional[Any]) -> None:
        old, self._target = self._target, value
        if old is value:
            return
        if old is not None:
            self._state.restore(old)
        if value is not None:
            self._state.save(value)
        self._emit("target_changed")

    # The change signals of the three requested-state properties fire only
    # when the previous value was set (non-zero).
    @property
    def accept_mouse_buttons(self) -> int:
        return self._requested.mouse_buttons

    @accept_mouse_buttons.setter
    def accept_mouse_buttons(self, buttons: int) -> None:
        old, self._requested.mouse_buttons = self._requested.mouse_buttons, buttons
        if old:
            self._emit("accept_mouse_buttons_changed")

    @property
    def accept_hover(self) -> bool:
        return self._requested.can_hover

    @accept_hover.setter
    def accept_hover(self, enabled: bool) -> None:
        old, self._requested.can_hover = self._requested.can_hover, enabled
        if old:
            self._emit("accept_hover_events_changed")

    @property
    def accept_touch(self) -> bool:
        return self._requested.can_touch

    @accept_touch.setter
    def accept_touch(self, accept: bool) -> None:
        old, self._requested.can_touch = self._requested.can_touch, accept
        if old:
            self._emit("accept_touch_events_changed")

    def trigger(self) -> None:
        """Apply the requested or the saved state to the target."""
        if self._target is None:
            return
        if self._when:
            self._requested.restore(self._target)
        else:
            self._state.restore(self._target)