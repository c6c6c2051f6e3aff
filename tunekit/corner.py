"""Corner radii, colour helpers and a create/delete tracker."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Any

_log = logging.getLogger(__name__)

Color = tuple[float, float, float, float]


@dataclass
class CornersGroup:
    """Radii of the four corners of a rectangle."""

    bottom_right: float = 0.0
    top_right: float = 0.0
    bottom_left: float = 0.0
    top_left: float = 0.0

    @classmethod
    def uniform(cls, radius: float) -> "CornersGroup":
        """All four corners with the same radius."""
        return cls(radius, radius, radius, radius)

    def to_vector4d(self) -> tuple[float, float, float, float]:
        """The radii as (bottom_right, top_right, bottom_left, top_left)."""
        return (self.bottom_right, self.top_right, self.bottom_left, self.top_left)


def corner(value: Any) -> CornersGroup:
    """Build corners from a number or a list given as top-left, top-right, bottom-left, bottom-right.

    One value sets all corners; two set the top pair and the bottom pair;
    three set top-left, top-right (also bottom-right) and bottom-left; four or
    more use the first four. Anything else gives all-zero corners.
    """
    if isinstance(value, Real):
        return CornersGroup.uniform(float(value))
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)) and value:
        values = [float(v) for v in value]
        if len(values) == 1:
            return CornersGroup.uniform(values[0])
        if len(values) == 2:
            top, bottom = values
            return CornersGroup(
                bottom_right=bottom, top_right=top, bottom_left=bottom, top_left=top
            )
        if len(values) == 3:
            top_left, top_right, bottom_left = values
            return CornersGroup(
                bottom_right=top_right,
                top_right=top_right,
                bottom_left=bottom_left,
                top_left=top_left,
            )
        top_left, top_right, bottom_left, bottom_right = values[:4]
        return CornersGroup(bottom_right, top_right, bottom_left, top_left)
    return CornersGroup()


def corners(
    bottom_right: float, top_right: float, bottom_left: float, top_left: float
) -> CornersGroup:
    """Build corners from four explicit radii."""
    return CornersGroup(bottom_right, top_right, bottom_left, top_left)


def transparent(color: Sequence[float], alpha: float) -> Color:
    """Return ``color`` (r, g, b[, a] in 0..1) with its alpha replaced."""
    if len(color) not in (3, 4):
        raise ValueError("color must have 3 or 4 components")
    if not 0.0 <= alpha <= 1.0:
        raise ValueError("alpha must be between 0 and 1")
    r, g, b = (float(c) for c in color[:3])
    return (r, g, b, float(alpha))


def hover_color(color: Sequence[float]) -> Color:
    """The state-layer colour used while hovering."""
    return transparent(color, 0.08)


def press_color(color: Sequence[float]) -> Color:
    """The state-layer colour used while pressed."""
    return transparent(color, 0.18)


class TrackKind(enum.IntEnum):
    """Kind of lifecycle event to track."""

    CREATE = 0
    DELETE = 1


class Tracker:
    """Counts objects created and deleted, logging each change."""

    def __init__(self) -> None:
        self.count = 0

    def track(self, kind: TrackKind) -> int:
        """Record a create or delete and return the live count."""
        if kind is TrackKind.CREATE:
            self.count += 1
            _log.warning("track create %d", self.count)
        elif kind is TrackKind.DELETE:
            self.count -= 1
            _log.warning("track delete %d", self.count)
        else:
            raise ValueError(f"unknown track kind: {kind!r}")
        return self.count